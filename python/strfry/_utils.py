"""Internal utilities for strfry."""

import math
from typing import Sequence, Union

from strfry.enums import Algorithm, PhoneticAlgorithm
from strfry.exceptions import AlgorithmError, ValidationError

# Valid algorithm names (lowercase)
VALID_ALGORITHMS = frozenset(a.value for a in Algorithm)
VALID_PHONETIC_ALGORITHMS = frozenset(a.value for a in PhoneticAlgorithm)


def ensure_str(value: object, name: str) -> str:
    """Reject anything that is not a ``str``.

    Raises:
        TypeError: If value is not a string.
    """
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")
    return value


def _lower(s: str) -> Sequence[str]:
    lowered = s.lower()
    if len(lowered) == len(s):
        return lowered
    # some characters lower to several code points ("İ"), so fold them one
    # by one and keep positions aligned with the input
    return [c.lower() for c in s]


def fold_case(s1: str, s2: str, ignore_case: bool) -> tuple[Sequence[str], Sequence[str]]:
    """Return case-folded copies of both strings when ignore_case is set.

    Folding never changes a length: each result has one item per character
    of its input, so a character whose lowercase form is several code points
    becomes a single multi-character item.
    """
    ensure_str(s1, "s1")
    ensure_str(s2, "s2")
    if ignore_case:
        return _lower(s1), _lower(s2)
    return s1, s2


def normalize_algorithm(algorithm: Union[str, Algorithm]) -> str:
    """Convert Algorithm enum to string, or validate string algorithm name.

    Args:
        algorithm: Either an Algorithm enum value or a string algorithm name.

    Returns:
        Lowercase string algorithm name.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.

    Example:
        >>> normalize_algorithm(Algorithm.JARO_WINKLER)
        'jaro_winkler'
        >>> normalize_algorithm("Levenshtein")
        'levenshtein'
    """
    return _normalize_name(algorithm, Algorithm, VALID_ALGORITHMS)


def normalize_phonetic_algorithm(algorithm: Union[str, PhoneticAlgorithm]) -> str:
    """Same as normalize_algorithm, for phonetic encoder names."""
    return _normalize_name(algorithm, PhoneticAlgorithm, VALID_PHONETIC_ALGORITHMS)


def _normalize_name(algorithm, enum_type, valid: frozenset) -> str:
    if isinstance(algorithm, enum_type):
        return algorithm.value

    if isinstance(algorithm, str):
        algo_lower = algorithm.lower()
        if algo_lower in valid:
            return algo_lower
        raise AlgorithmError(
            f"Unknown algorithm: '{algorithm}'. Valid options: {sorted(valid)}"
        )

    raise TypeError(
        f"algorithm must be str or {enum_type.__name__} enum, got {type(algorithm).__name__}"
    )


def validate_min_similarity(min_similarity: float) -> float:
    """Check that min_similarity is a finite number in [0.0, 1.0]."""
    if isinstance(min_similarity, bool) or not isinstance(min_similarity, (int, float)):
        raise ValidationError(
            f"min_similarity must be a number, got {type(min_similarity).__name__}"
        )
    if math.isnan(min_similarity) or not 0.0 <= min_similarity <= 1.0:
        raise ValidationError(
            f"min_similarity must be in range [0.0, 1.0], got {min_similarity}"
        )
    return float(min_similarity)


def validate_positive_int(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(f"{name} must be a positive integer, got {value!r}")
    return value


__all__ = [
    "ensure_str",
    "fold_case",
    "normalize_algorithm",
    "normalize_phonetic_algorithm",
    "validate_min_similarity",
    "validate_positive_int",
    "VALID_ALGORITHMS",
    "VALID_PHONETIC_ALGORITHMS",
]
