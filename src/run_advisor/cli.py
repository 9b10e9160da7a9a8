#!/usr/bin/env python3
"""
Run Advisor CLI.

Reads a JSON file with a runner profile, run history and an optional
check-in, and prints what to do next.

Usage:
    run-advisor recommend runner.json
    run-advisor pace runner.json
    run-advisor progress runner.json --weeks 8
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .analysis.progression import (
    NO_SUGGESTION,
    calculate_consistency_progress,
    check_for_auto_upgrade,
)
from .analysis.relative_pace import analyze_run, calculate_average_pace, should_suggest_upgrade
from .analysis.weekly import calculate_weekly_stats, sort_newest_first
from .config import get_config
from .exceptions import InputFileError, RunAdvisorError
from .metrics.pace import calculate_pace_zones
from .models.recommendation import SessionType
from .models.schemas import AdvisorInput
from .recommendations.engine import next_session
from .recommendations.explain import format_distance, summarize_week
from .recommendations.readiness import calculate_readiness
from .utils.log_sanitizer import configure_logging

console = Console()

SESSION_COLORS = {
    SessionType.FULL_REST: "blue",
    SessionType.REST_WITH_INJURY_ADVICE: "red",
    SessionType.STRENGTH_AND_MOBILITY: "cyan",
    SessionType.NEEDS_MORE_RUNS: "yellow",
}


def load_input(path: str) -> AdvisorInput:
    """Read and validate an input file."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise InputFileError(path, e.strerror or str(e))
    try:
        return AdvisorInput.model_validate(json.loads(raw))
    except json.JSONDecodeError as e:
        raise InputFileError(path, f"invalid JSON ({e.msg} at line {e.lineno})")
    except PydanticValidationError as e:
        raise InputFileError(path, f"{e.error_count()} invalid field(s)", details={"errors": e.errors()})


def _parse_now(value: Optional[str]) -> datetime:
    if not value:
        return datetime.now()
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"--now must be an ISO date/time, got '{value}'")


def cmd_recommend(args) -> None:
    """Print the next-session recommendation."""
    data = load_input(args.input)
    now = _parse_now(args.now)
    profile = data.profile.to_domain()
    runs = [run.to_domain() for run in data.runs]
    today = data.check_in.to_domain() if data.check_in else None

    rec = next_session(profile, runs, today, now=now)
    color = SESSION_COLORS.get(rec.type, "green")

    text = f"[bold {color}]{rec.type.display_name}[/bold {color}]\n"
    if rec.distance_km is not None:
        text += f"[cyan]Distance:[/cyan]  {format_distance(rec.distance_km, profile.distance_unit)}\n"
    text += f"\n{rec.explanation}"

    console.print()
    console.print(Panel(text, title=f"Next session for {profile.display_name}", box=box.ROUNDED))
    for warning in rec.warnings:
        console.print(f"[yellow]! {warning}[/yellow]")

    if runs:
        latest = sort_newest_first(runs)[0]
        readiness = calculate_readiness(profile, latest, today, now)
        console.print(f"[dim]Readiness: {readiness:.0f}/100[/dim]")
        console.print(f"[dim]{summarize_week(calculate_weekly_stats(runs, now), profile.distance_unit)}[/dim]")
    console.print()


def cmd_pace(args) -> None:
    """Print baseline pace, zones and feedback on the latest run."""
    data = load_input(args.input)
    now = _parse_now(args.now)
    unit = data.profile.distance_unit
    runs = [run.to_domain() for run in data.runs]

    baseline = calculate_average_pace(runs, now)
    if baseline is None:
        console.print(f"[yellow]Need at least {get_config().pace.baseline_min_runs} recent runs for a baseline pace.[/yellow]")
        return

    console.print()
    console.print(f"[bold]Baseline pace:[/bold] {baseline.format(unit)}")

    zones = calculate_pace_zones(baseline)
    table = Table(title="Pace Zones", box=box.ROUNDED)
    table.add_column("Zone", style="cyan")
    table.add_column(f"Pace (/{unit.abbreviation})", justify="right")
    for name in ("easy", "tempo", "threshold", "interval"):
        table.add_row(name.capitalize(), zones.format_range(getattr(zones, name), unit))
    console.print(table)

    feedback = analyze_run(sort_newest_first(runs)[0], runs, now)
    if feedback is not None:
        console.print(
            f"Last run: {feedback.pace.format(unit)} "
            f"([{feedback.category.color}]{feedback.category.display_name}[/{feedback.category.color}], "
            f"{feedback.percent_difference:+.1f}%)"
        )
        console.print(f"[italic]{feedback.message}[/italic]")

    if should_suggest_upgrade(runs):
        console.print("[green]Your pace has improved a lot - consider moving up a level.[/green]")
    console.print()


def cmd_progress(args) -> None:
    """Print consistency progress and any level-up suggestion."""
    data = load_input(args.input)
    now = _parse_now(args.now)
    profile = data.profile.to_domain()
    runs = [run.to_domain() for run in data.runs]

    progress = calculate_consistency_progress(runs, args.weeks, now)
    filled = int(progress.fraction * 20)
    bar = "█" * filled + "░" * (20 - filled)

    console.print()
    console.print(
        f"[bold]Weeks with at least one run:[/bold] {progress.completed_weeks} / {progress.required_weeks}"
    )
    console.print(f"{bar} {progress.fraction * 100:.0f}%")

    suggestion = check_for_auto_upgrade(NO_SUGGESTION, profile, runs)
    if suggestion.is_pending:
        console.print(
            f"[green]You're ready for {suggestion.level.display_name} recommendations![/green]"
        )
    elif profile.goal_description is None:
        console.print("[dim]Set a goal to track your progress more clearly.[/dim]")
    console.print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="run-advisor",
        description="Run Advisor - what to do in your next run",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  run-advisor recommend runner.json
  run-advisor recommend runner.json --now 2025-03-01T08:00
  run-advisor pace runner.json
  run-advisor progress runner.json --weeks 8
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    recommend_p = subparsers.add_parser("recommend", help="Recommend the next session")
    recommend_p.add_argument("input", help="JSON file with profile, runs and check_in")
    recommend_p.add_argument("--now", help="Reference time (ISO format)")

    pace_p = subparsers.add_parser("pace", help="Show baseline pace and zones")
    pace_p.add_argument("input", help="JSON file with profile and runs")
    pace_p.add_argument("--now", help="Reference time (ISO format)")

    progress_p = subparsers.add_parser("progress", help="Show level progress")
    progress_p.add_argument("input", help="JSON file with profile and runs")
    progress_p.add_argument("--weeks", "-w", type=int, default=None, help="Weeks required (default 8)")
    progress_p.add_argument("--now", help="Reference time (ISO format)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    commands = {
        "recommend": cmd_recommend,
        "pace": cmd_pace,
        "progress": cmd_progress,
    }
    if args.command not in commands:
        parser.print_help()
        return 1

    try:
        commands[args.command](args)
    except RunAdvisorError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        return 1
    except argparse.ArgumentTypeError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
