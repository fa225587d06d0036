"""Output formatting for CLI commands."""

import json
from enum import Enum
from typing import Any, NoReturn

import typer


class OutputFormat(str, Enum):
    json = "json"
    text = "text"


def _format_text(data: Any, indent: int = 0) -> list[str]:
    pad = "  " * indent
    lines = []
    if isinstance(data, dict):
        for key, value in data.items():
            if isinstance(value, (dict, list)) and value:
                lines.append(f"{pad}{key}:")
                lines.extend(_format_text(value, indent + 1))
            else:
                lines.append(f"{pad}{key}: {value}")
    elif isinstance(data, list):
        for item in data:
            if isinstance(item, (dict, list)):
                lines.append(f"{pad}-")
                lines.extend(_format_text(item, indent + 1))
            else:
                lines.append(f"{pad}- {item}")
    else:
        lines.append(f"{pad}{data}")
    return lines


def output(data: Any, format: OutputFormat = OutputFormat.json) -> None:
    """Write a command result to stdout."""
    if format == OutputFormat.json:
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        typer.echo("\n".join(_format_text(data)))


def output_error(code: str, message: str, exit_code: int) -> NoReturn:
    """Write a JSON error object to stderr and exit."""
    typer.echo(json.dumps({"error": {"code": code, "message": message}}), err=True)
    raise typer.Exit(exit_code)
