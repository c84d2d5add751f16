"""
Custom exceptions for the string_utils package.
"""


class StringUtilsError(Exception):
    """Base exception for all string_utils errors."""
    pass


class ConfigurationError(StringUtilsError):
    """Raised when configuration is invalid."""
    pass


class TableConsistencyError(StringUtilsError):
    """Raised when a table row does not match the rest of the table."""

    def __init__(self, message: str, row=None):
        super().__init__(message)
        self.row = row
