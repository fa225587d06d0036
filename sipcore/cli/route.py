"""Route / Record-Route header commands.

Commands:
    sipcore route parse <source>   Parse a header and list its hops
    sipcore route build <source>   Parse and re-assemble a header
"""

from typing import Any, Optional

import typer

from sipcore.cli.output import OutputFormat, output, output_error
from sipcore.cli.utils import EXIT_PARSE_ERROR, read_input
from sipcore.core import config
from sipcore.core.exceptions import RouteError
from sipcore.sip import route as route_hdr
from sipcore.sip.header import Header
from sipcore.sip.route_set import RouteSet

app = typer.Typer(
    name="route",
    help="Parse and assemble Route / Record-Route headers.",
    no_args_is_help=True,
)

KNOWN_HEADERS = (config.ROUTE_HEADER, config.RECORD_ROUTE_HEADER)


def _detect_header_name(lines: list[str]) -> Optional[str]:
    for line in lines:
        if not line.strip():
            continue
        prefix, sep, _ = line.partition(":")
        for name in KNOWN_HEADERS:
            if sep and prefix.strip().lower() == name.lower():
                return name
        return None
    return None


def _read_header(source: str, header_name: Optional[str]) -> Header:
    text = read_input(source)
    lines = text.splitlines()
    input_name = _detect_header_name(lines) or header_name or config.DEFAULT_HEADER
    header = Header.from_lines(input_name, lines)
    return Header(name=header_name or input_name, values=header.raw_values)


def _parse_or_exit(header: Header) -> RouteSet:
    try:
        return route_hdr.parse(header)
    except RouteError as e:
        output_error(code=e.code, message=e.message, exit_code=EXIT_PARSE_ERROR)


def route_to_dict(route: route_hdr.Route) -> dict[str, Any]:
    return {
        "display_name": route.display_name.text or None,
        "uri": str(route.uri),
        "loose_route": route.is_loose_route,
        "params": [
            {"name": key, "value": None if value is route_hdr.NOVALUE else value}
            for key, value in route.params
        ],
    }


@app.command("parse")
def parse_cmd(
    source: str = typer.Argument(
        ...,
        help="Header value(s), file path, or '-' for stdin",
    ),
    header_name: Optional[str] = typer.Option(
        None,
        "--header-name",
        "-n",
        help="Header name (default: detected from input, else SIPCORE_DEFAULT_HEADER)",
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.json,
        "--format",
        "-f",
        help="Output format",
    ),
) -> None:
    """Parse a Route / Record-Route header and display its hops.

    Each non-empty input line is one header instance; a leading
    "Route:" or "Record-Route:" is removed.

    Examples:
        sipcore route parse "<sip:p1.example.com;lr>, <sip:p2.example.com;lr>"
        sipcore route parse headers.txt
        cat headers.txt | sipcore route parse -
    """
    header = _read_header(source, header_name)
    route_set = _parse_or_exit(header)

    result = {
        "header": header.name,
        "routes": [route_to_dict(r) for r in route_set],
    }
    output(result, format)


@app.command("build")
def build_cmd(
    source: str = typer.Argument(
        ...,
        help="Header value(s), file path, or '-' for stdin",
    ),
    header_name: Optional[str] = typer.Option(
        None,
        "--header-name",
        "-n",
        help="Header name for the output (default: detected from input)",
    ),
    multiline: bool = typer.Option(
        False,
        "--multiline",
        help="Emit one header line per route instead of a comma-joined line",
    ),
) -> None:
    """Parse a Route / Record-Route header and print it in canonical form."""
    header = _read_header(source, header_name)
    route_set = _parse_or_exit(header)
    if route_set.is_empty:
        return

    built = route_hdr.build(header.name, route_set)
    if multiline:
        typer.echo("\n".join(built.assemble_lines()))
    else:
        typer.echo(built.assemble())
