"""Typer CLI for cabinet interior layouts."""

import logging
from typing import Annotated

import typer

from interiors.cli.commands import layout_command, validate_command

app = typer.Typer(
    name="interiors",
    help="Validate and lay out cabinet interior zone trees.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Cabinet interior layout tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="validate")(validate_command)
app.command(name="layout")(layout_command)


if __name__ == "__main__":
    app()
