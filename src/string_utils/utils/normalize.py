"""
String normalization and validation utilities.
"""
import logging
import re
import unicodedata
from typing import Collection, Iterable, List

from ..core.models import NormalizationMode, UnknownString
from . import escapes

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def _is_combining_diacritic(char: str) -> bool:
    return "\u0300" <= char <= "\u036f"


def normalize(text: str, strict: bool = False, strip_escapes: bool = False) -> str:
    """
    Normalize a string for comparison purposes.

    Removes accents, collapses internal whitespace, trims and lowercases.

    Args:
        text: Input string to normalize
        strict: Also remove every character that is not a letter or digit,
            spaces and underscores included
        strip_escapes: Also remove terminal escape sequences

    Returns:
        Normalized string

    Example:
        >>> normalize("   mY  sEaRcH      qUÉry_1  ")
        'my search query_1'
        >>> normalize("   mY  sEaRcH      qUÉry_1  ", strict=True)
        'mysearchquery1'
    """
    if not text:
        return ""

    # Split accented letters into base letter + combining mark, then drop the marks
    text = unicodedata.normalize("NFD", text)
    text = "".join(c for c in text if not _is_combining_diacritic(c))

    # Replace multiple whitespace with single space
    text = _WHITESPACE_RE.sub(" ", text)

    text = text.strip()
    text = text.lower()

    if strict:
        text = "".join(c for c in text if c.isalnum())

    if strip_escapes:
        text = escapes.strip_escapes(text)

    return text


def normalize_as(text: str, mode: NormalizationMode) -> str:
    """Normalize ``text`` using the switches of ``mode``."""
    return normalize(text, strict=mode.strict, strip_escapes=mode.strip_escapes)


def validate(value: UnknownString) -> bool:
    """
    Check that a value is a meaningful string.

    None, non-string values, "" and whitespace-only strings are all invalid.
    """
    if value is None or not isinstance(value, str):
        return False
    return normalize(value) != ""


def validate_against(value: UnknownString, allowed: Collection[str]) -> bool:
    """
    Check that a value is valid and one of the allowed strings.

    Membership is checked on the raw value, so it is case-sensitive.
    """
    return validate(value) and value in allowed


def is_palindrome(value: str, normalize_diacritics: bool = False) -> bool:
    """
    Check whether a string reads the same forwards and backwards.

    Args:
        value: The string to check
        normalize_diacritics: If True, accents and punctuation are ignored too
            (strict normalization). Otherwise only case and whitespace are.
    """
    if normalize_diacritics:
        candidate = normalize(value, strict=True)
    else:
        candidate = _WHITESPACE_RE.sub("", value.lower())
    return candidate == candidate[::-1]


def is_anagram(first: str, second: str) -> bool:
    """
    Check whether two strings are rearrangements of each other.

    Case and whitespace are ignored. Two identical strings are not anagrams.
    """
    if first == second:
        return False

    def letters(text: str) -> List[str]:
        return sorted(_WHITESPACE_RE.sub("", text.lower()))

    return letters(first) == letters(second)


def _normalize_valid(values: Iterable[UnknownString], mode: NormalizationMode) -> List[str]:
    result = [normalize_as(value, mode) for value in values if validate(value)]
    logger.debug(f"Normalized {len(result)} valid strings ({mode})")
    return result


def normalize_array(values: Iterable[UnknownString]) -> List[str]:
    """
    Drop invalid strings and normalize the rest.

    Example:
        >>> normalize_array(["    hIi ", "", " yés! ", None])
        ['hii', 'yes!']
    """
    return _normalize_valid(values, NormalizationMode.balanced())


def softly_normalize_array(
    values: Iterable[UnknownString], lowercase: bool = False
) -> List[str]:
    """
    Drop invalid strings and trim the rest, keeping accents and punctuation.

    Args:
        values: Strings to process
        lowercase: If True, strings are lowercased as well
    """
    trimmed = [value.strip() for value in values if validate(value)]
    return [value.lower() for value in trimmed] if lowercase else trimmed


def strictly_normalize_array(values: Iterable[UnknownString]) -> List[str]:
    """
    Drop invalid strings and strictly normalize the rest.

    Example:
        >>> strictly_normalize_array(["    hIi ", "", " 123_some thing"])
        ['hii', '123something']
    """
    return _normalize_valid(values, NormalizationMode.strictest())


def sort_alphabetically(values: Iterable[str]) -> List[str]:
    """Return a new list sorted by normalized form."""
    return sorted(values, key=normalize)
