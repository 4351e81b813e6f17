"""
CLI Output Utilities

Machine-aware output functions that adapt based on machine mode.
"""

import json
import typer
from typing import Any, Optional
from rich.console import Console as RichConsole
from rich.text import Text

from prepost.cli.config import CLIConfig


class MachineAwareConsole:
    """
    A Console wrapper that automatically adapts output based on machine mode.
    Acts as a drop-in replacement for rich.console.Console.
    """

    def __init__(self):
        self._rich_console = RichConsole()

    def print(self, *args, **kwargs):
        """Print that respects machine mode."""
        if not CLIConfig.is_machine_mode():
            self._rich_console.print(*args, **kwargs)
            return

        for arg in args:
            if isinstance(arg, str):
                plain = Text.from_markup(arg).plain.strip()
                if plain:
                    typer.echo(plain)
            elif hasattr(arg, "__rich__") or hasattr(arg, "__rich_console__"):
                # Tables and panels are human-only; machine callers use JSON
                continue
            elif arg:
                typer.echo(str(arg))

    def __getattr__(self, name):
        """Delegate all other attributes to the rich console."""
        return getattr(self._rich_console, name)


_console = MachineAwareConsole()


def get_console() -> MachineAwareConsole:
    return _console


def print_json(data: Any, minified: Optional[bool] = None) -> None:
    """
    Print JSON data respecting machine mode.
    In machine mode, always minifies. In human mode, pretty prints.
    """
    if minified is None:
        minified = CLIConfig.is_machine_mode()

    if minified:
        typer.echo(json.dumps(data, separators=(",", ":")))
    else:
        typer.echo(json.dumps(data, indent=CLIConfig.JSON_INDENT))


def print_error(message: str, code: Optional[str] = None, input_value: Optional[str] = None) -> None:
    """
    Print an error message respecting machine mode.
    In machine mode, outputs a structured JSON error on stdout.

    Args:
        message: Error message
        code: Error code (e.g., "INVALID_FRAMEWORK")
        input_value: The input that caused the error
    """
    if CLIConfig.is_machine_mode():
        error_obj = {
            "status": "error",
            "message": message
        }
        if code:
            error_obj["code"] = code
        if input_value:
            error_obj["input"] = input_value
        print_json(error_obj)
    else:
        typer.echo(f"Error: {message}", err=True)
