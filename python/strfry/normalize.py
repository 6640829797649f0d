"""Text normalization helpers.

The phonetic encoders only understand ASCII letters. Text with accents or
compatibility characters should be normalized first, either by calling
:func:`normalize_string` yourself or by handing a normalizer to the encoder:

    >>> import strfry
    >>> strfry.soundex("Çáŕẗéř", normalizer=strfry.normalize.nfkd)
    'C636'

Nothing here is applied implicitly.
"""

import unicodedata
from typing import Callable, Union

from strfry._utils import ensure_str
from strfry.enums import NormalizationMode
from strfry.exceptions import ValidationError

__all__ = ["Normalizer", "nfkd", "normalize_string", "normalize_pair"]

Normalizer = Callable[[str], str]


def nfkd(s: str) -> str:
    """Apply NFKD decomposition and drop the combining marks it produces."""
    decomposed = unicodedata.normalize("NFKD", s)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def _remove_punctuation(s: str) -> str:
    return "".join(c for c in s if not unicodedata.category(c).startswith("P"))


def _remove_whitespace(s: str) -> str:
    return "".join(s.split())


def _strict(s: str) -> str:
    return _remove_whitespace(_remove_punctuation(nfkd(s.lower())))


_MODES: dict[str, Normalizer] = {
    NormalizationMode.LOWERCASE.value: str.lower,
    NormalizationMode.UPPERCASE.value: str.upper,
    NormalizationMode.UNICODE_NFKD.value: nfkd,
    NormalizationMode.REMOVE_PUNCTUATION.value: _remove_punctuation,
    NormalizationMode.REMOVE_WHITESPACE.value: _remove_whitespace,
    NormalizationMode.STRICT.value: _strict,
}


def normalize_string(s: str, mode: Union[str, NormalizationMode]) -> str:
    """
    Normalize a string according to the specified mode.

    Args:
        s: String to normalize
        mode: Normalization mode - one of:
              "lowercase", "uppercase", "unicode_nfkd", "remove_punctuation",
              "remove_whitespace", "strict"
              Can also use NormalizationMode enum values.

    Returns:
        Normalized string

    Raises:
        ValidationError: If mode is not a known normalization mode.

    Example:
        >>> normalize_string("  Hello, World!  ", "strict")
        'helloworld'
        >>> normalize_string("Hello", NormalizationMode.LOWERCASE)
        'hello'
    """
    ensure_str(s, "s")
    key = mode.value if isinstance(mode, NormalizationMode) else str(mode).lower()
    try:
        func = _MODES[key]
    except KeyError:
        raise ValidationError(
            f"Unknown normalization mode: '{mode}'. Valid options: {sorted(_MODES)}"
        ) from None
    return func(s)


def normalize_pair(a: str, b: str, mode: Union[str, NormalizationMode]) -> tuple[str, str]:
    """Normalize both strings according to the specified mode."""
    return normalize_string(a, mode), normalize_string(b, mode)
