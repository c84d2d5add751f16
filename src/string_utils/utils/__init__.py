"""
Utilities package.
"""
from .escapes import has_escapes, strip_escapes, visual_length
from .normalize import (
    is_anagram,
    is_palindrome,
    normalize,
    normalize_array,
    normalize_as,
    softly_normalize_array,
    sort_alphabetically,
    strictly_normalize_array,
    validate,
    validate_against,
)
from .reveal import reveal
from .table import NO_DATA_MESSAGE, TableRenderer, describe_row, render_table
from .transforms import (
    capitalize_words,
    count_occurrences,
    extract_numbers,
    get_last_char,
    is_lower_case,
    is_upper_case,
    kominator,
    mask,
    plural_or_not,
    remove_whitespace,
    reverse_string,
    slugify,
    space_string,
    split_camel_or_pascal_case,
    split_kebab_case,
    split_snake_case,
    to_camel_case,
    to_kebab_case,
    to_lower_case_first,
    to_pascal_case,
    to_snake_case,
    to_title_case,
    to_upper_case_first,
    truncate,
)

__all__ = [
    "has_escapes",
    "strip_escapes",
    "visual_length",
    "is_anagram",
    "is_palindrome",
    "normalize",
    "normalize_array",
    "normalize_as",
    "softly_normalize_array",
    "sort_alphabetically",
    "strictly_normalize_array",
    "validate",
    "validate_against",
    "reveal",
    "NO_DATA_MESSAGE",
    "TableRenderer",
    "describe_row",
    "render_table",
    "capitalize_words",
    "count_occurrences",
    "extract_numbers",
    "get_last_char",
    "is_lower_case",
    "is_upper_case",
    "kominator",
    "mask",
    "plural_or_not",
    "remove_whitespace",
    "reverse_string",
    "slugify",
    "space_string",
    "split_camel_or_pascal_case",
    "split_kebab_case",
    "split_snake_case",
    "to_camel_case",
    "to_kebab_case",
    "to_lower_case_first",
    "to_pascal_case",
    "to_snake_case",
    "to_title_case",
    "to_upper_case_first",
    "truncate",
]
