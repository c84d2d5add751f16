"""
Terminal escape sequence handling.

Recognizes CSI sequences of the form ``ESC [ <params> <intermediates> <final>``
where parameter bytes are 0x30-0x3F, intermediate bytes 0x20-0x2F and the
final byte 0x40-0x7E. This covers colors, cursor movement and screen control.
"""
from typing import Iterator, Tuple

ESC = "\x1b"
CSI_INTRODUCER = "["


def _is_parameter(char: str) -> bool:
    return "\x30" <= char <= "\x3f"


def _is_intermediate(char: str) -> bool:
    return "\x20" <= char <= "\x2f"


def _is_final(char: str) -> bool:
    return "\x40" <= char <= "\x7e"


def _sequence_end(text: str, start: int) -> int:
    """
    Scan a candidate escape sequence beginning at ``text[start]``.

    Args:
        text: Text being scanned
        start: Index of an ESC character

    Returns:
        Index just past the sequence, or -1 if no complete sequence starts here
    """
    pos = start + 1
    if pos >= len(text) or text[pos] != CSI_INTRODUCER:
        return -1
    pos += 1

    while pos < len(text) and _is_parameter(text[pos]):
        pos += 1
    while pos < len(text) and _is_intermediate(text[pos]):
        pos += 1

    if pos < len(text) and _is_final(text[pos]):
        return pos + 1
    return -1


def iter_segments(text: str) -> Iterator[Tuple[str, bool]]:
    """
    Split text into runs of visible text and escape sequences.

    Yields:
        (segment, is_escape) tuples, in order
    """
    pos = 0
    run_start = 0
    while pos < len(text):
        if text[pos] == ESC:
            end = _sequence_end(text, pos)
            if end != -1:
                if run_start < pos:
                    yield text[run_start:pos], False
                yield text[pos:end], True
                pos = run_start = end
                continue
        pos += 1
    if run_start < len(text):
        yield text[run_start:], False


def strip_escapes(text: str) -> str:
    """
    Remove terminal escape sequences, leaving everything else untouched.

    An ESC that does not begin a complete sequence is kept as-is.

    Example:
        >>> strip_escapes("\\x1b[31mRed\\x1b[0m")
        'Red'
    """
    if not text:
        return ""
    return "".join(segment for segment, is_escape in iter_segments(text) if not is_escape)


def has_escapes(text: str) -> bool:
    return any(is_escape for _, is_escape in iter_segments(text or ""))


def visual_length(text: str) -> int:
    """Number of characters a terminal would display for ``text``."""
    return len(strip_escapes(text))
