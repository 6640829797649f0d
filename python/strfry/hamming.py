"""Hamming distance for equal-length strings."""

from strfry._utils import fold_case
from strfry.exceptions import InvalidInputLength

__all__ = ["hamming_distance", "hamming_similarity"]


def _hamming(s1: str, s2: str, ignore_case: bool) -> tuple[int, int]:
    folded1, folded2 = fold_case(s1, s2, ignore_case)
    if len(s1) != len(s2):
        raise InvalidInputLength(len(s1), len(s2))
    return sum(1 for a, b in zip(folded1, folded2) if a != b), len(s1)


def hamming_distance(s1: str, s2: str, ignore_case: bool = True) -> int:
    """Compute the Hamming distance between s1 and s2.

    Counts the positions at which the two strings differ.

    Args:
        s1: First string.
        s2: Second string, same length as s1.
        ignore_case: Compare lowercased copies of the strings (default True).

    Raises:
        InvalidInputLength: If the strings have different lengths.

    Example:
        >>> hamming_distance("karolin", "kathrin")
        3
    """
    return _hamming(s1, s2, ignore_case)[0]


def hamming_similarity(s1: str, s2: str, ignore_case: bool = True) -> float:
    """Normalized Hamming similarity: 1 - distance / length.

    Two empty strings have similarity 1.0.

    Raises:
        InvalidInputLength: If the strings have different lengths.
    """
    distance, length = _hamming(s1, s2, ignore_case)
    if not length:
        return 1.0
    return 1.0 - distance / length
