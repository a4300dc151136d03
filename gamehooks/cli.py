"""Command line helpers for gamehooks."""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from .app import HookApp
from .config import GameHooksConfig
from .diagnostics.checklist import run_checklist as checklist_run

console = Console()


def run_inspect() -> None:
    parser = argparse.ArgumentParser(description="List game event listeners")
    parser.add_argument("module", help="Python module with register(app) function")
    args = parser.parse_args()

    app = HookApp(GameHooksConfig.from_env())
    _load_module(args.module, app)

    names = app.events.event_names()
    if not names:
        console.print("[yellow]No game events have listeners.[/yellow]")
        return

    table = Table(title="Game event listeners")
    table.add_column("Event")
    table.add_column("Listeners", justify="right")
    table.add_column("Dead slots", justify="right")
    table.add_column("Scopes")
    for name in names:
        records = app.events.records(name)
        live = app.events.listeners(name)
        table.add_row(
            name,
            str(len(live)),
            str(len(records) - len(live)),
            ", ".join(repr(scope) for scope in live),
        )
    console.print(table)


def run_checklist() -> None:
    parser = argparse.ArgumentParser(description="gamehooks sanity checks")
    parser.add_argument("module", help="Python module with register(app) function")
    args = parser.parse_args()

    app = HookApp(GameHooksConfig.from_env())
    _load_module(args.module, app)

    issues = checklist_run(app)
    if not issues:
        console.print("[bold green]No problems found.[/bold green]")
        return
    for issue in issues:
        style = "red" if issue.severity == "error" else "yellow"
        console.print(f"[{style}]\\[{issue.severity.upper()}][/{style}] {issue.message}")
    if any(issue.severity == "error" for issue in issues):
        sys.exit(1)


def _load_module(path: str, app: HookApp) -> None:
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    module = importlib.import_module(path)
    if hasattr(module, "register"):
        module.register(app)
    else:
        console.print(f"[red]Module {path} has no register(app) function.[/red]")
        sys.exit(1)
