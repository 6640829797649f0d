"""Enums for selecting algorithms and normalization modes.

Every enum is a ``str`` subclass, so members compare equal to their plain
string names and either form is accepted by the public API.
"""

from enum import Enum


class Algorithm(str, Enum):
    """Similarity metrics available to the batch API and Polars namespace.

    Example:
        >>> from strfry import Algorithm, batch
        >>> [m.text for m in batch.best_matches(
        ...     ["Robert", "Rupert", "Roberta"], "Robret", algorithm=Algorithm.JARO, limit=1
        ... )]
        ['Robert']
    """

    LEVENSHTEIN = "levenshtein"
    """Edit distance, scored as ``1 - distance / max_len``"""

    JARO = "jaro"
    """Matching characters within a window, penalized for transpositions"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro plus a bonus for a shared prefix of up to four characters"""

    HAMMING = "hamming"
    """Positional mismatches. On strings of different length
    ``hamming_distance`` raises InvalidInputLength, batch scorers give 0.0
    and the Polars ``distance`` method gives null."""


class PhoneticAlgorithm(str, Enum):
    """Available phonetic encoders."""

    SOUNDEX = "soundex"
    """American Soundex, a letter followed by three digits"""

    METAPHONE = "metaphone"
    """Lawrence Philips' Metaphone, a variable-length consonant skeleton"""


class NormalizationMode(str, Enum):
    """Ways to clean up text before it is compared or encoded.

    Example:
        >>> from strfry import normalize_string, NormalizationMode
        >>> normalize_string("Café-Crème", NormalizationMode.STRICT)
        'cafecreme'
    """

    LOWERCASE = "lowercase"
    """``str.lower``"""

    UPPERCASE = "uppercase"
    """``str.upper``"""

    UNICODE_NFKD = "unicode_nfkd"
    """NFKD decomposition with combining marks dropped ("é" becomes "e")"""

    REMOVE_PUNCTUATION = "remove_punctuation"
    """Drop every character in a Unicode punctuation category"""

    REMOVE_WHITESPACE = "remove_whitespace"
    """Drop spaces, tabs and newlines"""

    STRICT = "strict"
    """Lowercase, then NFKD, then strip punctuation and whitespace"""


__all__ = ["Algorithm", "PhoneticAlgorithm", "NormalizationMode"]
