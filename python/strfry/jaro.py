"""Jaro and Jaro-Winkler similarity.

Both functions return a score in [0.0, 1.0] where 1.0 means the strings are
identical. Jaro-Winkler adds a bonus for a shared prefix of up to four
characters on top of the Jaro score.

Example:
    >>> import strfry
    >>> round(strfry.jaro_distance("MARTHA", "MARHTA"), 3)
    0.944
    >>> round(strfry.jaro_winkler("MARTHA", "MARHTA"), 3)
    0.961
"""

from typing import Sequence

from strfry._utils import fold_case
from strfry.exceptions import ValidationError

__all__ = ["jaro_distance", "jaro_winkler"]

MAX_PREFIX = 4
DEFAULT_PREFIX_WEIGHT = 0.1
MAX_PREFIX_WEIGHT = 0.25


def _matches(s1: Sequence[str], s2: Sequence[str]) -> tuple[int, int]:
    """Return (matches, transpositions) for two non-empty strings."""
    len1 = len(s1)
    len2 = len(s2)
    window = max(max(len1, len2) // 2 - 1, 0)

    flags1 = [False] * len1
    flags2 = [False] * len2

    matches = 0
    for i, ch in enumerate(s1):
        lo = max(0, i - window)
        hi = min(i + window + 1, len2)
        for j in range(lo, hi):
            if not flags2[j] and s2[j] == ch:
                flags1[i] = flags2[j] = True
                matches += 1
                break

    if not matches:
        return 0, 0

    # walk both matched subsequences in order
    half_transpositions = 0
    k = 0
    for i, ch in enumerate(s1):
        if not flags1[i]:
            continue
        while not flags2[k]:
            k += 1
        if ch != s2[k]:
            half_transpositions += 1
        k += 1

    return matches, half_transpositions // 2


def _jaro(s1: Sequence[str], s2: Sequence[str]) -> tuple[float, int]:
    if not s1 or not s2:
        return (1.0 if not s1 and not s2 else 0.0), 0

    matches, transpositions = _matches(s1, s2)
    if not matches:
        return 0.0, 0

    score = (
        matches / len(s1) + matches / len(s2) + (matches - transpositions) / matches
    ) / 3
    return score, matches


def jaro_distance(s1: str, s2: str, ignore_case: bool = True) -> float:
    """Get a Jaro string distance metric for s1 and s2.

    Characters match when they are equal and no further apart than
    ``max(len(s1), len(s2)) // 2 - 1`` positions; half the number of
    out-of-order matches counts as transpositions.

    Args:
        s1: First string.
        s2: Second string.
        ignore_case: Compare lowercased copies of the strings (default True).

    Returns:
        Score in [0.0, 1.0]. Two empty strings score 1.0; an empty string
        against a non-empty one scores 0.0.

    Complexity:
        Time: O(len(s1) * len(s2)) worst case.
        Space: O(len(s1) + len(s2)).
    """
    s1, s2 = fold_case(s1, s2, ignore_case)
    return _jaro(s1, s2)[0]


def jaro_winkler(
    s1: str,
    s2: str,
    ignore_case: bool = True,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    long_tolerance: bool = False,
) -> float:
    """Do a Jaro-Winkler string comparison between s1 and s2.

    The Jaro score ``jd`` is boosted by ``l * prefix_weight * (1 - jd)``
    where ``l`` is the length of the common prefix, capped at 4. The boost
    is applied whenever ``l > 0``, regardless of the Jaro score.

    Args:
        s1: First string.
        s2: Second string.
        ignore_case: Compare lowercased copies of the strings (default True).
        prefix_weight: Scaling factor for the prefix bonus, in [0.0, 0.25]
            (default 0.1).
        long_tolerance: Apply the extra adjustment for long strings that
            agree beyond the prefix (default False).

    Returns:
        Score in [0.0, 1.0], never lower than ``jaro_distance(s1, s2)``.

    Raises:
        ValidationError: If prefix_weight is outside [0.0, 0.25].

    Example:
        >>> round(jaro_winkler("DWAYNE", "DUANE"), 3)
        0.84
    """
    if not 0.0 <= prefix_weight <= MAX_PREFIX_WEIGHT:
        raise ValidationError(
            f"prefix_weight must be in range [0.0, {MAX_PREFIX_WEIGHT}], got {prefix_weight}"
        )

    s1, s2 = fold_case(s1, s2, ignore_case)
    score, matches = _jaro(s1, s2)

    min_len = min(len(s1), len(s2))
    prefix = 0
    for a, b in zip(s1[:MAX_PREFIX], s2[:MAX_PREFIX]):
        if a != b:
            break
        prefix += 1

    if prefix:
        score += prefix * prefix_weight * (1.0 - score)

    if (
        long_tolerance
        and min_len > MAX_PREFIX
        and matches > prefix + 1
        and 2 * matches >= min_len + prefix
        and not s1[0].isdigit()
    ):
        score += (1.0 - score) * (
            (matches - prefix - 1) / (len(s1) + len(s2) - prefix * 2 + 2)
        )

    return score
