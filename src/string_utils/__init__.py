"""
String Utils - normalization, validation and table rendering for strings.

This package provides functionality to:
- Normalize text (accents, whitespace, case, terminal escape codes)
- Validate possibly-missing strings
- Render key/value records as box-drawing tables
- Convert between camelCase, snake_case, kebab-case and friends

Example:
    Basic usage from command line:

    $ string-utils normalize "  mY  sEaRcH  qUÉry "

    Programmatic usage:

    >>> from string_utils import normalize, validate, render_table
    >>> validate("   ")
    False
    >>> normalize("  mY  sEaRcH  qUÉry ")
    'my search query'
    >>> print(render_table([{"Name": "Zaka", "Age": 55}]))
"""

__version__ = "0.1.0"
__license__ = "MIT"

# CLI interface
from .cli import cli
from .core.config import Config
from .core.exceptions import (
    ConfigurationError,
    StringUtilsError,
    TableConsistencyError,
)
from .core.models import NormalizationMode, Record, UnknownString
from .utils import (
    capitalize_words,
    count_occurrences,
    describe_row,
    extract_numbers,
    get_last_char,
    has_escapes,
    is_anagram,
    is_lower_case,
    is_palindrome,
    is_upper_case,
    kominator,
    mask,
    normalize,
    normalize_array,
    normalize_as,
    NO_DATA_MESSAGE,
    plural_or_not,
    remove_whitespace,
    render_table,
    reveal,
    reverse_string,
    slugify,
    softly_normalize_array,
    sort_alphabetically,
    space_string,
    split_camel_or_pascal_case,
    split_kebab_case,
    split_snake_case,
    strictly_normalize_array,
    strip_escapes,
    TableRenderer,
    to_camel_case,
    to_kebab_case,
    to_lower_case_first,
    to_pascal_case,
    to_snake_case,
    to_title_case,
    to_upper_case_first,
    truncate,
    validate,
    validate_against,
    visual_length,
)

__all__ = [
    "__version__",
    "Config",
    "NormalizationMode",
    "Record",
    "UnknownString",
    "StringUtilsError",
    "ConfigurationError",
    "TableConsistencyError",
    "cli",
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
