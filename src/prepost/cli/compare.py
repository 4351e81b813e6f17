"""
CLI Comparison Commands

Commands:
  plan     - Before/after URLs and screenshot files for affected routes
  markdown - Markdown table for two existing images
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.table import Table

from prepost.changes import get_changed_files
from prepost.compare import (
    build_comparison_plan,
    generate_markdown,
    generate_plan_markdown,
    parse_route_list,
    select_routes,
)
from prepost.exceptions import ConfigError
from prepost.logging_config import logger
from prepost.routes import detect_routes
from prepost.schemas import ComparisonPlan, DetectedRoute
from prepost.cli.config import CLIConfig
from prepost.cli.output import get_console, print_error, print_json
from prepost.cli.routes import parse_framework_or_exit

console = get_console()


def render_plan_table(plan: ComparisonPlan) -> Table:
    table = Table(title=f"Comparison plan ({len(plan.targets)} captures)")
    table.add_column("Route", style="cyan", no_wrap=True)
    table.add_column("Viewport")
    table.add_column("Before", style="magenta")
    table.add_column("After", style="green")

    for target in plan.targets:
        viewport = f"{target.preset} {target.viewport}" if target.preset else str(target.viewport)
        table.add_row(target.route, viewport, target.before_url, target.after_url)
    return table


def plan(
    before_base: str = typer.Option(..., "--before-base", help="Base URL for the before state (production)."),
    after_base: str = typer.Option(..., "--after-base", help="Base URL for the after state (localhost)."),
    routes: Optional[str] = typer.Option(
        None, "--routes", help="Explicit route list (comma-separated). Skips detection."
    ),
    responsive: bool = typer.Option(False, "--responsive", "-r", help="Capture desktop and mobile viewports."),
    viewport: str = typer.Option("desktop", "--viewport", help="desktop, tablet, mobile or WxH."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output directory (default: ~/Downloads)."),
    framework: Optional[str] = typer.Option(
        None, "--framework", help="Force framework (app-router, pages-router, generic)."
    ),
    max_routes: Optional[int] = typer.Option(
        None, "--max-routes", min=1, help="Max routes to detect (default: 5)."
    ),
    diff_target: Optional[str] = typer.Option(None, "--diff-target", help="Git diff target (default: HEAD)."),
    markdown: bool = typer.Option(False, "--markdown", help="Print a markdown table per capture."),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON."),
):
    """
    Plan before/after captures for explicit or auto-detected routes.
    """
    forced = parse_framework_or_exit(framework)

    explicit = parse_route_list(routes)
    detected: List[DetectedRoute] = []
    if not explicit:
        changed_files = get_changed_files(diff_target)
        if changed_files:
            detected = detect_routes(changed_files, framework=forced, max_routes=max_routes)
        else:
            logger.info("No changed files detected")

    route_list = select_routes(explicit, detected)

    try:
        comparison = build_comparison_plan(
            before_base,
            after_base,
            route_list,
            responsive=responsive,
            viewport=viewport,
            output_dir=output,
        )
    except ConfigError as e:
        print_error(str(e), code="INVALID_VIEWPORT", input_value=viewport)
        raise typer.Exit(code=1)

    if markdown:
        typer.echo(generate_plan_markdown(comparison.targets))
        return

    if json_output or CLIConfig.is_machine_mode():
        print_json(comparison.model_dump(mode="json"))
        return

    if detected:
        console.print(f"Detected routes: {', '.join(route_list)}")
    console.print(render_plan_table(comparison))
    console.print(f"[dim]Screenshots go to: {comparison.output_dir}[/dim]")


def markdown_cmd(
    before: str = typer.Argument(..., help="Before image path or URL."),
    after: str = typer.Argument(..., help="After image path or URL."),
    before_label: str = typer.Option("Before", "--before-label", help="Label for the before column."),
    after_label: str = typer.Option("After", "--after-label", help="Label for the after column."),
):
    """
    Print a GitHub-flavored markdown table for two images.
    """
    typer.echo(generate_markdown(before, after, before_label, after_label))
