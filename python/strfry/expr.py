"""Polars expression namespace for string similarity and phonetic codes.

Importing strfry registers a `.strfry` namespace on Polars expressions, so
similarity scores and phonetic codes can be computed inside select,
with_columns and filter calls. Every method evaluates the pure-Python metrics
row by row through ``map_elements``.

Null inputs produce null outputs.

Example:
    >>> import polars as pl
    >>> import strfry  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["Smith", "Smyth", "Jones"]})
    >>> df.with_columns(
    ...     close=pl.col("name").strfry.is_similar("Smith", min_similarity=0.85)
    ... )
"""

import logging
from typing import Callable, Literal, Optional, Union

import polars as pl

from strfry._utils import (
    normalize_algorithm,
    normalize_phonetic_algorithm,
    validate_min_similarity,
)
from strfry.batch import best_matches, get_scorer
from strfry.enums import Algorithm, NormalizationMode, PhoneticAlgorithm
from strfry.exceptions import AlgorithmError, InvalidInputLength
from strfry.hamming import hamming_distance
from strfry.levenshtein import levenshtein_distance
from strfry.normalize import normalize_string
from strfry.phonetic import metaphone, soundex

logger = logging.getLogger(__name__)

_DISTANCES: dict[str, Callable[[str, str], int]] = {
    "levenshtein": levenshtein_distance,
    "hamming": hamming_distance,
}

_ENCODERS = {
    "soundex": soundex,
    "metaphone": metaphone,
}


def _pair_expr(
    left: pl.Expr,
    other: Union[str, pl.Expr],
    func: Callable[[str, str], object],
    return_dtype: pl.DataType,
) -> pl.Expr:
    """Apply func(left_value, other_value) row-wise, keeping nulls null."""
    if isinstance(other, str):
        # Compare against a literal string
        return left.map_elements(lambda s: func(s, other), return_dtype=return_dtype)

    def apply_row(row: dict) -> Optional[object]:
        if row["_left"] is None or row["_right"] is None:
            return None
        return func(row["_left"], row["_right"])

    return pl.struct([left.alias("_left"), other.alias("_right")]).map_elements(
        apply_row, return_dtype=return_dtype
    )


@pl.api.register_expr_namespace("strfry")
class StrfryExprNamespace:
    """
    Methods available as `.strfry` on any string expression.

    Each method returns a new expression; nothing is evaluated until the
    frame is collected.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def similarity(
        self,
        other: Union[str, pl.Expr],
        algorithm: Union[
            str,
            Algorithm,
            Literal["jaro", "jaro_winkler", "levenshtein", "hamming"],
        ] = "jaro_winkler",
    ) -> pl.Expr:
        """
        Score each value against a literal string or a second column.

        Args:
            other: String literal, or an expression yielding strings
            algorithm: Metric name or Algorithm member

        Returns:
            Float64 expression with scores in [0.0, 1.0]

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name").strfry.similarity("John")
            ... )
            >>> df.with_columns(
            ...     score=pl.col("name1").strfry.similarity(pl.col("name2"))
            ... )
        """
        scorer = get_scorer(algorithm)
        return _pair_expr(self._expr, other, scorer, pl.Float64)

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: float = 0.8,
        algorithm: Union[
            str,
            Algorithm,
            Literal["jaro", "jaro_winkler", "levenshtein", "hamming"],
        ] = "jaro_winkler",
    ) -> pl.Expr:
        """
        Flag values whose score reaches min_similarity.

        Args:
            other: String literal, or an expression yielding strings
            min_similarity: Threshold in [0.0, 1.0], inclusive
            algorithm: Metric name or Algorithm member

        Returns:
            Boolean expression

        Raises:
            ValidationError: If min_similarity is outside [0.0, 1.0].

        Example:
            >>> df.filter(pl.col("name").strfry.is_similar("John", min_similarity=0.85))
        """
        min_similarity = validate_min_similarity(min_similarity)
        return self.similarity(other, algorithm=algorithm) >= min_similarity

    def distance(
        self,
        other: Union[str, pl.Expr],
        algorithm: Union[str, Algorithm, Literal["levenshtein", "hamming"]] = "levenshtein",
    ) -> pl.Expr:
        """
        Count edits between each value and a literal string or a second column.

        Hamming distance of values with different lengths is null.

        Args:
            other: String literal, or an expression yielding strings
            algorithm: "levenshtein" (default) or "hamming"

        Returns:
            Int64 expression

        Example:
            >>> df.with_columns(
            ...     dist=pl.col("name").strfry.distance("John")
            ... )
        """
        algo = normalize_algorithm(algorithm)
        if algo not in _DISTANCES:
            raise AlgorithmError(
                f"Unknown distance algorithm: {algo}. Valid: {list(_DISTANCES.keys())}"
            )
        dist_func = _DISTANCES[algo]

        def measure(a: str, b: str) -> Optional[int]:
            try:
                return dist_func(a, b)
            except InvalidInputLength:
                return None

        return _pair_expr(self._expr, other, measure, pl.Int64)

    def best_match(
        self,
        choices: list[str],
        algorithm: Union[
            str,
            Algorithm,
            Literal["jaro", "jaro_winkler", "levenshtein", "hamming"],
        ] = "jaro_winkler",
        min_similarity: float = 0.0,
    ) -> pl.Expr:
        """
        Replace each value with its highest scoring entry from choices.

        Args:
            choices: Candidate strings
            algorithm: Metric name or Algorithm member
            min_similarity: Best scores below this give null

        Returns:
            Utf8 expression

        Example:
            >>> categories = ["Electronics", "Clothing", "Food"]
            >>> df.with_columns(
            ...     category=pl.col("raw_category").strfry.best_match(categories)
            ... )
        """
        algo = normalize_algorithm(algorithm)
        min_similarity = validate_min_similarity(min_similarity)
        choices = list(choices)
        logger.debug("best_match over %d choices with %s", len(choices), algo)

        def find_best(value: str) -> Optional[str]:
            results = best_matches(
                choices, value, algorithm=algo, limit=1, min_similarity=min_similarity
            )
            return results[0].text if results else None

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8)

    def phonetic(
        self,
        algorithm: Union[str, PhoneticAlgorithm, Literal["soundex", "metaphone"]] = "soundex",
    ) -> pl.Expr:
        """
        Encode each value with a phonetic algorithm.

        Args:
            algorithm: "soundex" (default) or "metaphone"

        Returns:
            Utf8 expression of codes

        Example:
            >>> df.with_columns(
            ...     soundex=pl.col("name").strfry.phonetic("soundex")
            ... )
        """
        func = _ENCODERS[normalize_phonetic_algorithm(algorithm)]
        return self._expr.map_elements(func, return_dtype=pl.Utf8)

    def normalize(
        self,
        mode: Union[
            NormalizationMode,
            Literal[
                "lowercase",
                "uppercase",
                "unicode_nfkd",
                "remove_punctuation",
                "remove_whitespace",
                "strict",
            ],
        ] = "lowercase",
    ) -> pl.Expr:
        """
        Clean up values before matching.

        Args:
            mode: Normalization mode, see :func:`strfry.normalize_string`

        Returns:
            Utf8 expression

        Example:
            >>> df.with_columns(
            ...     normalized=pl.col("name").strfry.normalize("strict")
            ... )
        """
        # fail on a bad mode now rather than at collect time
        normalize_string("", mode)
        return self._expr.map_elements(
            lambda value: normalize_string(value, mode), return_dtype=pl.Utf8
        )
