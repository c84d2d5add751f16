"""
Character-by-character terminal output.
"""
import time
from typing import IO, Optional

import click

DEFAULT_DELAY_MS = 50


def reveal(text: str, delay_ms: int = DEFAULT_DELAY_MS, file: Optional[IO[str]] = None) -> None:
    """
    Print a string one character at a time.

    Args:
        text: String to reveal
        delay_ms: Delay before each character is shown, in milliseconds
        file: Stream to write to (defaults to stdout)
    """
    for char in text:
        time.sleep(delay_ms / 1000)
        click.echo(char, file=file, nl=False)
    click.echo(file=file)  # Move to the next line after completing
