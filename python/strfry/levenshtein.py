"""Levenshtein edit distance."""

from strfry._utils import ensure_str

__all__ = ["levenshtein_distance", "levenshtein_similarity"]


def levenshtein_distance(s1: str, s2: str) -> int:
    """Compute the Levenshtein distance between s1 and s2.

    The minimum number of single-character insertions, deletions and
    substitutions needed to turn one string into the other. Comparison is
    case-sensitive and per code point.

    Complexity:
        Time: O(len(s1) * len(s2)).
        Space: O(min(len(s1), len(s2))), two rolling rows.

    Example:
        >>> levenshtein_distance("kitten", "sitting")
        3
    """
    ensure_str(s1, "s1")
    ensure_str(s2, "s2")

    if s1 == s2:
        return 0
    # rows are sized by the shorter string
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    if not s2:
        return len(s1)

    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, 1):
        current = [i]
        for j, c2 in enumerate(s2, 1):
            if c1 == c2:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current

    return previous[-1]


def levenshtein_similarity(s1: str, s2: str) -> float:
    """Normalized Levenshtein similarity: 1 - distance / max(len(s1), len(s2)).

    Two empty strings have similarity 1.0.
    """
    distance = levenshtein_distance(s1, s2)
    longest = max(len(s1), len(s2))
    if not longest:
        return 1.0
    return 1.0 - distance / longest
