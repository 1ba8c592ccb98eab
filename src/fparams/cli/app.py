import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from fparams.cli.check import check

app = typer.Typer(
    name="fparams",
    help="Check that Go function parameters and returns are inline or one per line.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("check")(check)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main() -> None:
    app()
