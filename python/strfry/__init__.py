"""
strfry - String similarity metrics and phonetic encoders

A small pure-Python library for fuzzy matching, deduplication and record
linkage: edit distances, Jaro-family similarity scores and the classic
Soundex and Metaphone phonetic codes.

Example usage:
    >>> import strfry

    # Similarity scores
    >>> round(strfry.jaro_winkler("MARTHA", "MARHTA"), 3)
    0.961
    >>> strfry.levenshtein_distance("kitten", "sitting")
    3

    # Phonetic codes
    >>> strfry.soundex("Robert"), strfry.soundex("Rupert")
    ('R163', 'R163')
    >>> strfry.metaphone("Thompson")
    'TMSN'

    # Rank candidates (returns MatchResult objects)
    >>> matches = strfry.batch.best_matches(["apple", "apply", "banana"], "appel")
    >>> [m.text for m in matches][:2]
    ['apple', 'apply']
"""

import logging
from importlib.metadata import version as _get_version

from strfry import batch, normalize
from strfry.batch import MatchResult
from strfry.enums import Algorithm, NormalizationMode, PhoneticAlgorithm
from strfry.exceptions import (
    AlgorithmError,
    InvalidInputLength,
    StrfryError,
    ValidationError,
)
from strfry.hamming import hamming_distance, hamming_similarity
from strfry.jaro import jaro_distance, jaro_winkler
from strfry.levenshtein import levenshtein_distance, levenshtein_similarity
from strfry.normalize import normalize_pair, normalize_string
from strfry.phonetic import (
    SOUNDEX_SENTINEL,
    metaphone,
    metaphone_match,
    soundex,
    soundex_match,
)

# -----------------------------------------------------------------------------
# Polars Integration
# -----------------------------------------------------------------------------
# Registers the .strfry expression namespace.
# See: strfry.expr module docstring for details.
import strfry.expr  # noqa: E402, F401

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _get_version("strfry")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "StrfryError",
    "ValidationError",
    "InvalidInputLength",
    "AlgorithmError",
    # Result types
    "MatchResult",
    # Enums
    "Algorithm",
    "PhoneticAlgorithm",
    "NormalizationMode",
    # Distance/similarity functions
    "jaro_distance",
    "jaro_winkler",
    "levenshtein_distance",
    "levenshtein_similarity",
    "hamming_distance",
    "hamming_similarity",
    # Phonetic encoders
    "soundex",
    "soundex_match",
    "metaphone",
    "metaphone_match",
    "SOUNDEX_SENTINEL",
    # Normalization
    "normalize_string",
    "normalize_pair",
    # Submodules
    "batch",
    "normalize",
]


# Convenience aliases
edit_distance = levenshtein_distance
similarity = jaro_winkler
