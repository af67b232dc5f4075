from __future__ import annotations

import typer

from fuzzy_align import __version__
from fuzzy_align.logging_config import setup_logging
from fuzzy_align.search import compute_match_length, fuzzy_match

__all__ = [
    "cli",
    "run",
]


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"fuzzy-align {__version__}")
    raise typer.Exit()


cli = typer.Typer(
    add_completion=False,
    help="Score a pattern against a choice and print the matched indices.",
)


@cli.command()
def run(
    choice: str = typer.Argument(..., help="Candidate string to search in."),
    pattern: str = typer.Argument(..., help="Pattern typed by the user."),
    span: bool = typer.Option(
        False,
        "--span",
        help="Print the start and length of the leftmost match instead.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log scoring details to stderr.",
    ),
    _version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Score PATTERN against CHOICE and print the matched indices.

    Put -- before a CHOICE or PATTERN that starts with '-'.
    """
    setup_logging(verbose=verbose)

    if span:
        match_span = compute_match_length(choice, pattern)
        if match_span is None:
            typer.echo("no match", err=True)
            raise typer.Exit(code=1)
        start, length = match_span
        typer.echo(f"{start}\t{length}")
        return

    result = fuzzy_match(choice, pattern)
    if result is None:
        typer.echo("no match", err=True)
        raise typer.Exit(code=1)
    score, indices = result
    typer.echo(f"{score}\t{','.join(str(index) for index in indices)}")


if __name__ == "__main__":
    cli()
