"""
Box-drawing table rendering for key/value records.

Cell widths are measured on the visible text only, so values carrying
terminal color codes still line up.
"""
import logging
import numbers
from decimal import Decimal
from typing import Any, List, Mapping, Sequence

from ..core.exceptions import TableConsistencyError
from ..core.models import Record
from .escapes import visual_length
from .normalize import validate

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data to display."


def _flatten(value: Any) -> List[str]:
    """Flatten a value into comma-joinable parts."""
    if value is None:
        return [""]
    if isinstance(value, (list, tuple)):
        parts: List[str] = []
        for item in value:
            parts.extend(_flatten(item))
        return parts
    if isinstance(value, dict):
        return _flatten(list(value.items()))
    return [str(value)]


def describe_row(row: Record) -> str:
    """
    Flatten a row into ``key,value,key,value`` form for error messages.

    Example:
        >>> describe_row({"Key": "Value5", "Key3": "Value6"})
        'Key,Value5,Key3,Value6'
    """
    if not isinstance(row, Mapping):
        return ",".join(_flatten(row))
    return ",".join(_flatten(list(row.items())))


def _inconsistent(row: Record) -> TableConsistencyError:
    return TableConsistencyError(
        f"Unable to represent data. Row {describe_row(row)} "
        f"is not consistent with the rest of the table.",
        row=row,
    )


def _is_scalar(value: Any) -> bool:
    # Booleans are not numbers here; True and False are both rejected.
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, numbers.Real, Decimal))


class TableRenderer:
    """Render a list of records as a box-drawing table.

    Example output:
        ┌──────────┬─────┬─────────┐
        │ Name     │ Age │ Country │
        ├──────────┼─────┼─────────┤
        │ Zaka     │ 50  │ Spain   │
        │ Someone  │ 25  │ Poland  │
        └──────────┴─────┴─────────┘
    """

    # Separator characters
    VERTICAL = " │ "
    HORIZONTAL = "─"
    CROSS = "┼"
    TOP_TEE = "┬"
    BOTTOM_TEE = "┴"
    LEFT_TEE = "├"
    RIGHT_TEE = "┤"
    TOP_LEFT = "┌"
    BOTTOM_LEFT = "└"
    TOP_RIGHT = "┐"
    BOTTOM_RIGHT = "┘"

    def render(self, records: Sequence[Record]) -> str:
        """
        Render records as a table.

        Args:
            records: Rows sharing the same keys. The first row sets the column order.

        Returns:
            The table, "No data to display." for no records, or an
            "Error: ..." message when a row does not fit the table
        """
        if not records:
            return NO_DATA_MESSAGE

        try:
            if not isinstance(records[0], Mapping):
                raise _inconsistent(records[0])
            headers = list(records[0].keys())
            self._check_schema(headers, records)
            widths = self._column_widths(headers, records)
            header_row = self._format_row(
                [self._format_cell(h, widths[i]) for i, h in enumerate(headers)]
            )
            data_rows = [
                self._format_row(self._format_data_cells(headers, row, widths))
                for row in records
            ]
        except TableConsistencyError as e:
            logger.warning(f"Refusing to render table: {e}")
            return f"Error: {e}"

        return "\n".join(
            [
                self._separator(widths, self.TOP_LEFT, self.TOP_TEE, self.TOP_RIGHT),
                header_row,
                self._separator(widths, self.LEFT_TEE, self.CROSS, self.RIGHT_TEE),
                *data_rows,
                self._separator(
                    widths, self.BOTTOM_LEFT, self.BOTTOM_TEE, self.BOTTOM_RIGHT
                ),
            ]
        )

    @staticmethod
    def _check_schema(headers: List[str], records: Sequence[Record]) -> None:
        """Every record must have exactly the keys of the first one."""
        expected = set(headers)
        for row in records[1:]:
            if not isinstance(row, Mapping) or set(row.keys()) != expected:
                raise _inconsistent(row)

    @staticmethod
    def _column_widths(headers: List[str], records: Sequence[Record]) -> List[int]:
        widths = []
        for header in headers:
            cell_lengths = [
                visual_length(str(row[header]).strip()) + 1
                for row in records
                if _is_scalar(row[header])
            ]
            widths.append(max([visual_length(header.strip())] + cell_lengths))
        logger.debug(f"Column widths: {dict(zip(headers, widths))}")
        return widths

    @staticmethod
    def _format_cell(value: str, width: int) -> str:
        """Left-align a cell, padding for the visible text only."""
        trimmed = value.strip()
        hidden = len(trimmed) - visual_length(trimmed)
        return trimmed.ljust(width + hidden)

    def _format_data_cells(
        self, headers: List[str], row: Record, widths: List[int]
    ) -> List[str]:
        cells = []
        for i, header in enumerate(headers):
            value = row.get(header)
            if not value or not _is_scalar(value) or not validate(str(value)):
                raise _inconsistent(row)
            cells.append(self._format_cell(str(value), widths[i]))
        return cells

    def _format_row(self, cells: List[str]) -> str:
        return (
            f"{self.VERTICAL.lstrip()}{self.VERTICAL.join(cells)}{self.VERTICAL.rstrip()}"
        )

    def _separator(self, widths: List[int], left: str, middle: str, right: str) -> str:
        return f"{left}{middle.join(self.HORIZONTAL * (w + 2) for w in widths)}{right}"


def render_table(records: Sequence[Record]) -> str:
    """Render records with the default :class:`TableRenderer`."""
    return TableRenderer().render(records)
