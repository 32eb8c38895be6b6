from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from .version import __version__
from .utils.logging import setup_logger
from .pipeline import RunConfig, run


app = typer.Typer(add_completion=False, help="Reformat RFC 2646 format=flowed text.")


@app.command()
def main(
    input: Optional[Path] = typer.Argument(None, help="Input file (default: stdin)", show_default=False),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Output file (default: stdout)"),
    quote: bool = typer.Option(False, "--quote", "-q", help="Add one level of quoting to every line"),
    fixed: bool = typer.Option(False, "--fixed", help="Treat unquoted input lines as format=fixed"),
    max_length: Optional[int] = typer.Option(
        None, "--max-length", envvar="TEXTFLOWED_MAX_LENGTH", help="Rewrap lines longer than this (default 79)"
    ),
    opt_length: Optional[int] = typer.Option(
        None, "--opt-length", envvar="TEXTFLOWED_OPT_LENGTH", help="Width of rewrapped lines (default 72)"
    ),
    encoding: str = typer.Option("utf-8", "--encoding", help="Input and output encoding"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
    version: bool = typer.Option(False, "--version", help="Print version and exit"),
):
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    logger = setup_logger(log_level)
    cfg = RunConfig(
        input=input,
        output=output,
        quote=quote,
        fixed=fixed,
        max_length=max_length,
        opt_length=opt_length,
        encoding=encoding,
    )
    try:
        run(cfg)
    except (OSError, UnicodeError) as e:
        logger.error(f"Cannot read or write: {e}")
        raise typer.Exit(code=2)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        raise typer.Exit(code=2)


def entrypoint():
    app()

if __name__ == "__main__":
    entrypoint()
