"""
Core configuration, data models and exceptions.
"""
from .config import Config
from .exceptions import ConfigurationError, StringUtilsError, TableConsistencyError
from .models import NormalizationMode, Record, UnknownString

__all__ = [
    "Config",
    "ConfigurationError",
    "StringUtilsError",
    "TableConsistencyError",
    "NormalizationMode",
    "Record",
    "UnknownString",
]
