"""
CLI-specific logic for the table command.

Reading and validating the JSON input lives here, while the layout itself is
delegated to the TableRenderer.
"""
import json
import logging
from typing import IO, List

import click

from ..core.exceptions import StringUtilsError
from ..core.models import Record
from ..utils.table import render_table

logger = logging.getLogger(__name__)


def load_records(source: IO[str]) -> List[Record]:
    """Load a JSON array of objects from an open stream."""
    try:
        data = json.load(source)
    except json.JSONDecodeError as e:
        raise StringUtilsError(f"Input is not valid JSON: {e}")

    if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
        raise StringUtilsError("Input must be a JSON array of objects")

    logger.info(f"Loaded {len(data)} records")
    return data


def execute_table_command(source: IO[str]) -> None:
    """
    Execute the table command.

    Raises:
        click.ClickException: If the input cannot be read or the renderer
            reports an inconsistent row
    """
    try:
        records = load_records(source)
    except StringUtilsError as e:
        raise click.ClickException(str(e))

    rendered = render_table(records)
    if rendered.startswith("Error: "):
        raise click.ClickException(rendered[len("Error: "):])

    click.echo(rendered)
