"""Batch operations API for strfry.

This module provides list-based batch operations on strings. Every function
is a plain loop over the single-pair metrics, so results are exactly what
calling the metric yourself would give.

Example usage:
    >>> import strfry.batch as batch

    # Score a query against every candidate
    >>> results = batch.similarity(["hello", "hallo", "world"], "helo", algorithm="levenshtein")
    >>> [(r.text, round(r.score, 2)) for r in results]
    [('hello', 0.8), ('hallo', 0.6), ('world', 0.2)]

    # Keep the best few
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
    >>> [m.text for m in matches]
    ['apple', 'apply']

    # Score two aligned lists element by element
    >>> batch.pairwise(["kitten", "abc"], ["sitting", "abc"], algorithm="levenshtein")
    [0.5714285714285714, 1.0]

    # Group names that sound alike
    >>> batch.phonetic_groups(["Robert", "Rupert", "Rubin"])
    {'R163': ['Robert', 'Rupert'], 'R150': ['Rubin']}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from strfry._utils import (
    ensure_str,
    normalize_algorithm,
    normalize_phonetic_algorithm,
    validate_min_similarity,
    validate_positive_int,
)
from strfry.exceptions import InvalidInputLength, ValidationError
from strfry.hamming import hamming_similarity
from strfry.jaro import jaro_distance, jaro_winkler
from strfry.levenshtein import levenshtein_similarity
from strfry.phonetic import SOUNDEX_SENTINEL, metaphone, soundex

if TYPE_CHECKING:
    from strfry.enums import Algorithm, PhoneticAlgorithm

__all__ = [
    "MatchResult",
    "get_scorer",
    "similarity",
    "best_matches",
    "pairwise",
    "similarity_matrix",
    "phonetic_groups",
]

logger = logging.getLogger(__name__)

Scorer = Callable[[str, str], float]


@dataclass(frozen=True)
class MatchResult:
    """
    Result from best_matches and batch operations.

    Attributes:
        text: The candidate string.
        score: Similarity score (0.0-1.0).
        id: Index of the candidate in the input list.

    Supports equality comparison and hashing for use in sets and as dict keys.
    """

    text: str
    score: float
    id: Optional[int] = None


def _hamming_or_zero(s1: str, s2: str) -> float:
    try:
        return hamming_similarity(s1, s2)
    except InvalidInputLength:
        return 0.0


_SCORERS: dict[str, Scorer] = {
    "jaro": jaro_distance,
    "jaro_winkler": jaro_winkler,
    "levenshtein": levenshtein_similarity,
    "hamming": _hamming_or_zero,
}

_ENCODERS: dict[str, Callable[[str], str]] = {
    "soundex": soundex,
    "metaphone": metaphone,
}


def get_scorer(algorithm: str | Algorithm) -> Scorer:
    """Return the two-argument similarity function for an algorithm name.

    Hamming similarity of strings with different lengths scores 0.0 here
    instead of raising.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
    """
    return _SCORERS[normalize_algorithm(algorithm)]


def _check_strings(strings: list[str], name: str) -> None:
    for value in strings:
        ensure_str(value, f"{name} element")


def similarity(
    strings: list[str],
    query: str,
    algorithm: str | Algorithm = "jaro_winkler",
) -> list[MatchResult]:
    """Score query against every string in strings.

    Scores come back in input order, one MatchResult per string.

    Args:
        strings: Candidates.
        query: String every candidate is scored against.
        algorithm: "jaro", "jaro_winkler" (default), "levenshtein" or
            "hamming", by name or as an Algorithm member. Hamming scores
            candidates of a different length as 0.0.

    Returns:
        MatchResult per candidate; `id` is its index in strings.
    """
    scorer = get_scorer(algorithm)
    ensure_str(query, "query")
    _check_strings(strings, "strings")
    return [
        MatchResult(text, scorer(query, text), i) for i, text in enumerate(strings)
    ]


def best_matches(
    strings: list[str],
    query: str,
    algorithm: str | Algorithm = "jaro_winkler",
    limit: int = 5,
    min_similarity: float = 0.0,
) -> list[MatchResult]:
    """Return the highest scoring candidates for query.

    Candidates below min_similarity are dropped, the rest are ordered by
    score with ties left in input order, and at most limit are returned.

    Args:
        strings: Candidates.
        query: String every candidate is scored against.
        algorithm: Metric name or Algorithm member, as for similarity().
        limit: Maximum number of results (default 5).
        min_similarity: Inclusive lower bound on the score (default 0.0).

    Returns:
        MatchResults, best first.

    Raises:
        ValidationError: If limit is not positive or min_similarity is
            outside [0.0, 1.0].
    """
    validate_positive_int(limit, "limit")
    min_similarity = validate_min_similarity(min_similarity)

    scored = [r for r in similarity(strings, query, algorithm) if r.score >= min_similarity]
    scored.sort(key=lambda r: (-r.score, r.id))
    logger.debug(
        "best_matches: %d of %d candidates at or above %.3f",
        len(scored),
        len(strings),
        min_similarity,
    )
    return scored[:limit]


def pairwise(
    left: list[str],
    right: list[str],
    algorithm: str | Algorithm = "jaro_winkler",
) -> list[float]:
    """Score left[i] against right[i] for every i.

    Returns:
        One score in [0.0, 1.0] per pair.

    Raises:
        ValidationError: If left and right have different lengths.

    Example:
        >>> pairwise(["MARTHA"], ["MARHTA"], algorithm="jaro")
        [0.9444444444444445]
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have the same length, got {len(left)} and {len(right)}"
        )
    scorer = get_scorer(algorithm)
    _check_strings(left, "left")
    _check_strings(right, "right")
    return [scorer(a, b) for a, b in zip(left, right)]


def similarity_matrix(
    queries: list[str],
    choices: list[str],
    algorithm: str | Algorithm = "levenshtein",
) -> list[list[float]]:
    """Score every query against every choice.

    Returns:
        Rows follow queries and columns follow choices, so result[i][j]
        scores queries[i] against choices[j].

    Example:
        >>> matrix = similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
        >>> len(matrix), len(matrix[0])
        (2, 3)
    """
    scorer = get_scorer(algorithm)
    _check_strings(queries, "queries")
    _check_strings(choices, "choices")
    logger.debug("similarity_matrix: %d x %d", len(queries), len(choices))
    return [[scorer(q, c) for c in choices] for q in queries]


def phonetic_groups(
    strings: list[str],
    algorithm: str | PhoneticAlgorithm = "soundex",
) -> dict[str, list[str]]:
    """Group strings by their phonetic code.

    Strings without any letters have no meaningful code and are left out.
    Groups and their members keep first-seen order.

    Args:
        strings: Strings to group.
        algorithm: "soundex" (default) or "metaphone".

    Returns:
        Mapping of phonetic code to the strings that encode to it.
    """
    encode = _ENCODERS[normalize_phonetic_algorithm(algorithm)]
    groups: dict[str, list[str]] = {}
    skipped = 0
    for text in strings:
        code = encode(text)
        if not code or code == SOUNDEX_SENTINEL:
            skipped += 1
            continue
        groups.setdefault(code, []).append(text)
    if skipped:
        logger.debug("phonetic_groups: skipped %d strings without letters", skipped)
    return groups
