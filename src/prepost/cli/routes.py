"""
CLI Route Detection Commands

Commands:
  detect - Detect routes affected by the current git changes
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.table import Table

from prepost.changes import get_changed_files
from prepost.exceptions import ConfigError
from prepost.schemas import Framework, RouteDetectionResult
from prepost.routes import detect_routes_with_report
from prepost.cli.config import CLIConfig
from prepost.cli.output import get_console, print_error, print_json

console = get_console()

CONFIDENCE_STYLES = {"high": "green", "medium": "yellow", "low": "dim"}


def parse_framework_or_exit(value: Optional[str]) -> Optional[Framework]:
    """Parse --framework, exiting with a structured error on unknown names."""
    if value is None:
        return None
    try:
        return Framework.parse(value)
    except ConfigError as e:
        print_error(str(e), code="INVALID_FRAMEWORK", input_value=value)
        raise typer.Exit(code=1)


def render_routes_table(result: RouteDetectionResult) -> Table:
    framework = result.framework.value if result.framework else "unknown"
    table = Table(title=f"Affected routes ({framework})")
    table.add_column("Route", style="cyan", no_wrap=True)
    table.add_column("Confidence")
    table.add_column("Source File", style="magenta")
    table.add_column("Reason")

    for route in result.routes:
        style = CONFIDENCE_STYLES[route.confidence]
        table.add_row(route.path, f"[{style}]{route.confidence}[/]", route.source_file, route.reason)
    return table


def detection_payload(changed_files: List[str], result: RouteDetectionResult) -> dict:
    return {
        "framework": result.framework.value if result.framework else None,
        "changedFiles": changed_files,
        "routes": [route.model_dump(by_alias=True) for route in result.routes],
        "totalDetected": result.total_detected,
        "truncated": result.truncated,
    }


def detect(
    framework: Optional[str] = typer.Option(
        None, "--framework", help="Force framework (app-router, pages-router, generic)."
    ),
    max_routes: Optional[int] = typer.Option(
        None, "--max-routes", min=1, help="Max routes to detect (default: 5)."
    ),
    diff_target: Optional[str] = typer.Option(
        None, "--diff-target", help="Git diff target, e.g. main...HEAD or HEAD~1 (default: HEAD)."
    ),
    root: Path = typer.Option(
        Path("."), "--root", exists=True, file_okay=False, help="Project root to inspect."
    ),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON."),
):
    """
    Detect affected routes from the git diff.
    """
    forced = parse_framework_or_exit(framework)
    as_json = json_output or CLIConfig.is_machine_mode()

    changed_files = get_changed_files(diff_target, cwd=root)
    if not changed_files:
        if as_json:
            print_json({"routes": [], "message": "No changed files detected"})
        else:
            console.print("[yellow]No changed files detected[/yellow]")
        return

    def notify(total: int, kept: int) -> None:
        console.print(
            f"[yellow]Detected {total} routes, showing top {kept}. Use --max-routes to increase.[/yellow]"
        )

    result = detect_routes_with_report(
        changed_files,
        framework=forced,
        max_routes=max_routes,
        root_dir=root,
        on_truncate=None if as_json else notify,
    )

    if as_json:
        print_json(detection_payload(changed_files, result))
        return

    console.print(f"[dim]{len(changed_files)} changed files[/dim]")
    if not result.routes:
        console.print("No visual routes detected.")
        return
    console.print(render_routes_table(result))
