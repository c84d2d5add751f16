"""
Simple string transforms: casing, splitting, slugs, masking and counting.
"""
import re
from typing import List, Union

from .normalize import normalize

SMALL_WORDS = ("and", "or", "but", "the", "in", "on", "of", "for", "with")

_WORD_START_RE = re.compile(r"\b\w", re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")
_CASE_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")
_WORD_SEPARATOR_RE = re.compile(r"[\s_\-]+")
_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


def to_upper_case_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def to_lower_case_first(text: str) -> str:
    return text[:1].lower() + text[1:]


def capitalize_words(text: str) -> str:
    """Capitalize the first letter of each word ("deno the runtime" -> "Deno The Runtime")."""
    return _WORD_START_RE.sub(lambda m: m.group().upper(), text)


def to_title_case(text: str) -> str:
    """
    Capitalize each word except small words like "the" or "and".

    The first word is always capitalized.
    """
    words = text.split(" ")
    return " ".join(
        word.lower()
        if index != 0 and word.lower() in SMALL_WORDS
        else to_upper_case_first(word)
        for index, word in enumerate(words)
    )


def reverse_string(text: str) -> str:
    return text[::-1]


def remove_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub("", text)


def get_last_char(text: str) -> str:
    return text[-1:]


def truncate(text: str, length: int, preserve_words: bool = False) -> str:
    """
    Truncate a string and append "..." if it is longer than ``length``.

    Args:
        text: The string to truncate
        length: Maximum number of characters kept
        preserve_words: If True, cut at the last space before ``length``
            instead of in the middle of a word

    Example:
        >>> truncate("Hello, world!", 5)
        'Hello...'
    """
    if len(text) <= length:
        return text

    cut = text[:length]
    if preserve_words:
        last_space = cut.rfind(" ")
        if last_space > 0:
            cut = cut[:last_space].rstrip()
    return cut + "..."


def space_string(text: str, space_before: int, space_after: int) -> str:
    return f"{' ' * max(space_before, 0)}{text}{' ' * max(space_after, 0)}"


def kominator(text: str, separator: str = ",") -> List[str]:
    """
    Split a string on commas (or a custom separator) and trim each piece.

    Example:
        >>> kominator("alpha, bravo,charlie")
        ['alpha', 'bravo', 'charlie']
    """
    return [piece.replace('"', "", 1).strip() for piece in text.split(separator)]


def count_occurrences(text: str, needle: str) -> int:
    """Count non-overlapping occurrences of ``needle`` in ``text``."""
    if not needle:
        return 0
    return text.count(needle)


def plural_or_not(word: str, count: Union[int, float]) -> str:
    """
    Return ``word`` pluralized unless ``count`` is exactly one.

    Handles the common English endings (leaf -> leaves, city -> cities,
    box -> boxes); everything else gets a trailing "s".
    """
    if count == 1 or not word:
        return word

    lower = word.lower()
    if lower.endswith("fe"):
        return word[:-2] + "ves"
    if lower.endswith("f") and not lower.endswith("ff"):
        return word[:-1] + "ves"
    if lower.endswith("y") and len(lower) > 1 and lower[-2] not in "aeiou":
        return word[:-1] + "ies"
    if lower.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    return word + "s"


def is_upper_case(text: str) -> bool:
    return text == text.upper()


def is_lower_case(text: str) -> bool:
    return text == text.lower()


def _words(text: str) -> List[str]:
    """Lowercased words, split on whitespace, "_", "-" and camelCase humps."""
    spaced = _CASE_BOUNDARY_RE.sub(r"\1 \2", text)
    return [word.lower() for word in _WORD_SEPARATOR_RE.split(spaced) if word]


def split_snake_case(text: str) -> List[str]:
    return [word for word in text.split("_") if word]


def split_kebab_case(text: str) -> List[str]:
    return [word for word in text.split("-") if word]


def split_camel_or_pascal_case(text: str) -> List[str]:
    """
    Split camelCase or PascalCase into lowercase words.

    Example:
        >>> split_camel_or_pascal_case("Some VariableLol")
        ['some', 'variable', 'lol']
    """
    spaced = _CASE_BOUNDARY_RE.sub(r"\1 \2", text)
    return [word.lower() for word in spaced.split()]


def slugify(text: str) -> str:
    """
    Turn a string into a URL-friendly slug.

    Example:
        >>> slugify("Some nasty string that wouldn't work as a URL!")
        'some-nasty-string-that-wouldnt-work-as-a-url'
    """
    cleaned = re.sub(r"[^a-z0-9\s-]", "", normalize(text))
    return re.sub(r"[\s-]+", "-", cleaned).strip("-")


def mask(text: str, visible: int = 4, mask_char: str = "*") -> str:
    """
    Mask all but the last ``visible`` characters.

    Example:
        >>> mask("to be masked", 2, "#")
        '##########ed'
    """
    if visible <= 0:
        return mask_char * len(text)
    if len(text) <= visible:
        return text
    return mask_char * (len(text) - visible) + text[-visible:]


def to_camel_case(text: str) -> str:
    words = _words(text)
    if not words:
        return ""
    return words[0] + "".join(word.capitalize() for word in words[1:])


def to_pascal_case(text: str) -> str:
    return "".join(word.capitalize() for word in _words(text))


def to_snake_case(text: str) -> str:
    return "_".join(_words(text))


def to_kebab_case(text: str) -> str:
    return "-".join(_words(text))


def extract_numbers(text: str) -> List[Union[int, float]]:
    """
    Pull every number out of a string, in order.

    Example:
        >>> extract_numbers("2 packages, 40 downloads, 1.5 stars")
        [2, 40, 1.5]
    """
    return [
        float(match) if "." in match else int(match)
        for match in _NUMBER_RE.findall(text)
    ]
