"""sipcore command line entry point."""

from typing import Optional

import typer

from sipcore.cli import route
from sipcore.core.logging import configure_logging

app = typer.Typer(
    name="sipcore",
    help="SIP header grammar tools.",
    no_args_is_help=True,
)
app.add_typer(route.app, name="route")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Enable JSON logging to stderr at this level (e.g. DEBUG)",
    ),
) -> None:
    """SIP header grammar tools."""
    if log_level:
        configure_logging(log_level=log_level)


if __name__ == "__main__":
    app()
