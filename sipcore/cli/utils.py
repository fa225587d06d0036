"""Shared CLI helpers: exit codes and input handling."""

import sys
from pathlib import Path

EXIT_PARSE_ERROR = 2


def read_input(source: str) -> str:
    """Read command input.

    Args:
        source: '-' for stdin, an existing file path, or the literal value

    Returns:
        Input text
    """
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    try:
        is_file = path.is_file()
    except OSError:
        # header values can exceed the file name length limit
        is_file = False
    if is_file:
        return path.read_text(encoding="utf-8")

    return source
