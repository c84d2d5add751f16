"""
Data models for the string_utils package.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional

# A value that is *possibly* a string. None means missing; "" and "   " are
# present but blank.
UnknownString = Optional[str]

# One table row. Values are normally scalars; anything else is rejected by
# the table renderer.
Record = Mapping[str, Any]


@dataclass(frozen=True)
class NormalizationMode:
    """Optional steps applied on top of the base canonicalization."""

    strict: bool = False
    strip_escapes: bool = False

    @classmethod
    def balanced(cls) -> "NormalizationMode":
        return cls()

    @classmethod
    def strictest(cls) -> "NormalizationMode":
        """Alphanumeric-only output with escape sequences removed."""
        return cls(strict=True, strip_escapes=True)

    def __str__(self) -> str:
        flags = [name for name in ("strict", "strip_escapes") if getattr(self, name)]
        return "+".join(flags) if flags else "base"
