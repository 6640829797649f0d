"""Phonetic encoders: American Soundex and Metaphone.

Both encoders work on the ASCII letters of their input. Anything else
(digits, punctuation, whitespace, accented letters) is skipped, so accented
text should be normalized before it gets here; pass ``normalizer=`` (for
example :func:`strfry.normalize.nfkd`) to have that done per call.

Example:
    >>> soundex("Robert"), soundex("Rupert")
    ('R163', 'R163')
    >>> metaphone("Thompson")
    'TMSN'
"""

from string import ascii_letters
from typing import Optional

from strfry._utils import ensure_str, validate_positive_int
from strfry.normalize import Normalizer

__all__ = [
    "SOUNDEX_SENTINEL",
    "soundex",
    "soundex_match",
    "metaphone",
    "metaphone_match",
]

_ASCII_LETTERS = frozenset(ascii_letters)

SOUNDEX_SENTINEL = "0000"
"""Soundex code returned for input without any ASCII letters."""

_SOUNDEX_CODES = {
    **dict.fromkeys("BFPV", "1"),
    **dict.fromkeys("CGJKQSXZ", "2"),
    **dict.fromkeys("DT", "3"),
    "L": "4",
    **dict.fromkeys("MN", "5"),
    "R": "6",
}
# letters with no digit that still keep a run of equal digits together
_SOUNDEX_SEPARATORS = frozenset("HW")

_VOWELS = frozenset("AEIOU")
_FRONT_VOWELS = frozenset("EIY")
_H_DIGRAPH_LEADS = frozenset("CGPST")
_METAPHONE_SILENT_START = ("AE", "GN", "KN", "PN", "WR")
_METAPHONE_PASSTHROUGH = frozenset("FJLMNR")
_METAPHONE_SIMPLE = {"Q": "K", "V": "F", "Z": "S"}


def _letters(s: str, normalizer: Optional[Normalizer]) -> str:
    """Uppercased ASCII letters of s, after the optional normalizer."""
    ensure_str(s, "s")
    if normalizer is not None:
        s = ensure_str(normalizer(s), "normalizer result")
    return "".join(c for c in s if c in _ASCII_LETTERS).upper()


def soundex(s: str, normalizer: Optional[Normalizer] = None) -> str:
    """
    Calculate the soundex code for a given name.

    The first letter is kept and the following consonants are mapped to
    digit classes; a digit repeated by adjacent letters (or letters separated
    only by H or W) is written once. The code is padded with zeros or cut to
    one letter and three digits.

    Args:
        s: Name to encode. Non-letters are skipped.
        normalizer: Optional callable applied to s before encoding.

    Returns:
        Four-character code, or ``"0000"`` when s has no ASCII letters.

    Complexity:
        Time: O(n) where n is the string length.
        Space: O(1) beyond the filtered copy of the input.

    Example:
        >>> soundex("Tymczak")
        'T522'
        >>> soundex("Pfister")
        'P236'
    """
    letters = _letters(s, normalizer)
    if not letters:
        return SOUNDEX_SENTINEL

    first = letters[0]
    digits = []
    last = _SOUNDEX_CODES.get(first, "")
    for letter in letters[1:]:
        code = _SOUNDEX_CODES.get(letter, "")
        if code and code != last:
            digits.append(code)
            if len(digits) == 3:
                break
        if letter not in _SOUNDEX_SEPARATORS:
            last = code

    return first + "".join(digits).ljust(3, "0")


def metaphone(
    s: str,
    normalizer: Optional[Normalizer] = None,
    max_length: Optional[int] = None,
) -> str:
    """
    Calculate the metaphone representation of a given string.

    Lawrence Philips' Metaphone reduces a word to a skeleton of consonant
    sounds. Vowels are kept only as the first letter and ``0`` stands for
    the "th" sound.

    Two surname rules go beyond the classic rule set: TH before OM or AM is
    a plain T ("Thomas", "Thompson"), and P is silent in an -MPSON or -MPSEN
    ending, so "Thompson" and "Thomson" both encode as ``TMSN`` and
    "Simpson" as ``SMSN``. Other MPS sequences keep their P ("Lampshade").

    Args:
        s: Word to encode. Non-letters, including spaces, are skipped.
        normalizer: Optional callable applied to s before encoding.
        max_length: Truncate the code to this many characters. The default
            is no truncation.

    Returns:
        Uppercase code, empty when s has no ASCII letters.

    Raises:
        ValidationError: If max_length is not a positive integer.

    Example:
        >>> metaphone("Stephen"), metaphone("Steven")
        ('STFN', 'STFN')
        >>> metaphone("Knight")
        'NT'
    """
    if max_length is not None:
        validate_positive_int(max_length, "max_length")

    word = _letters(s, normalizer)
    initial_wh = word.startswith("WH")
    if word.startswith(_METAPHONE_SILENT_START):
        word = word[1:]
    elif word.startswith("X"):
        word = "S" + word[1:]
    elif word.startswith("WH"):
        word = "W" + word[2:]

    code = []
    last = len(word) - 1
    first = word[:1]
    # length of the run of equal letters that opens the word
    lead = 1 if first == "C" else len(word) - len(word.lstrip(first))
    for i, c in enumerate(word):
        nxt = word[i + 1] if i < last else ""
        # a leading run is encoded from its first letter, any other run
        # from its last; CC is never collapsed
        if i < lead:
            if i:
                continue
        elif c == nxt and c != "C":
            continue
        prev = word[i - 1] if i else ""
        after = word[i + 2] if i + 1 < last else ""

        if c in _VOWELS:
            if i == 0:
                code.append(c)
        elif c in _METAPHONE_PASSTHROUGH:
            code.append(c)
        elif c in _METAPHONE_SIMPLE:
            code.append(_METAPHONE_SIMPLE[c])
        elif c == "B":
            # silent in a trailing MB, as in "dumb"
            if not (prev == "M" and i == last):
                code.append("B")
        elif c == "C":
            if nxt == "I" and after == "A":
                code.append("X")
            elif nxt == "H":
                code.append("K" if prev == "S" else "X")
            elif nxt in _FRONT_VOWELS:
                if prev != "S":
                    code.append("S")
            else:
                code.append("K")
        elif c == "D":
            if nxt == "G" and after in _FRONT_VOWELS:
                code.append("J")
            else:
                code.append("T")
        elif c == "G":
            if nxt == "H" and after not in _VOWELS:
                pass
            elif nxt == "N" and (i + 1 == last or word[i + 1:] == "NED"):
                pass
            elif prev == "D" and nxt in _FRONT_VOWELS:
                pass
            elif nxt in _FRONT_VOWELS and prev != "G":
                code.append("J")
            else:
                code.append("K")
        elif c == "H":
            if prev in _H_DIGRAPH_LEADS:
                pass
            elif prev in _VOWELS and nxt not in _VOWELS:
                pass
            else:
                code.append("H")
        elif c == "K":
            if prev != "C":
                code.append("K")
        elif c == "P":
            if nxt == "H":
                code.append("F")
            elif not (prev == "M" and word[i + 1:i + 4] in ("SON", "SEN")):
                code.append("P")
        elif c == "S":
            if nxt == "H" or (nxt == "I" and after in ("O", "A")):
                code.append("X")
            else:
                code.append("S")
        elif c == "T":
            if nxt == "I" and after in ("O", "A"):
                code.append("X")
            elif nxt == "H":
                # "Thomas", "Thompson", "Thames"
                code.append("T" if word[i + 2:i + 4] in ("OM", "AM") else "0")
            elif not (nxt == "C" and after == "H"):
                code.append("T")
        elif c == "W":
            if nxt in _VOWELS or (i == 0 and initial_wh):
                code.append("W")
        elif c == "X":
            code.append("S" if i == 0 else "KS")
        elif c == "Y":
            if nxt in _VOWELS:
                code.append("Y")

    result = "".join(code)
    if max_length is not None:
        return result[:max_length]
    return result


def soundex_match(a: str, b: str) -> bool:
    """Check if two strings have the same Soundex code.

    Strings without letters never match.
    """
    code = soundex(a)
    return code != SOUNDEX_SENTINEL and code == soundex(b)


def metaphone_match(a: str, b: str) -> bool:
    """Check if two strings have the same Metaphone code.

    Strings that encode to an empty code never match.
    """
    code = metaphone(a)
    return bool(code) and code == metaphone(b)
