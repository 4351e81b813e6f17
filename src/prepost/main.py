import typer

from prepost import __version__
from prepost.logging_config import logger, setup_logging
from prepost.cli import routes, compare
from prepost.cli.config import CLIConfig

app = typer.Typer(help="prepost: before/after screenshots for pull requests.")


# Global CLI callback for flags that apply to all commands
@app.callback()
def global_options(
    human: bool = typer.Option(
        False,
        "--human",
        "-H",
        help="Enable human mode: tables and colors instead of JSON (also via PREPOST_HUMAN_MODE env var)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
):
    """
    prepost: detect the routes a change affects and plan before/after captures.

    Machine mode is DEFAULT (JSON output, no console logging).
    Use --human/-H for pretty output.
    """
    CLIConfig.set_machine_mode(False if human else None)

    if CLIConfig.is_machine_mode() and not verbose:
        setup_logging(suppress_console=True, force=True)
    else:
        setup_logging(level="DEBUG" if verbose else "INFO", suppress_console=False, force=True)


app.command(name="detect")(routes.detect)
app.command(name="plan")(compare.plan)
app.command(name="markdown")(compare.markdown_cmd)


@app.command()
def version():
    """
    Prints the current version of prepost.
    """
    logger.debug(f"prepost v{__version__}")
    typer.echo(f"prepost v{__version__}")


if __name__ == "__main__":
    app()
