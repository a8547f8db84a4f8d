#!/usr/bin/env python3
"""
fileops - Interactive File Operations

Main entry point for the fileops CLI application.
"""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from typing import Optional

from core import (
    __version__,
    AuditLogger,
    ActionStatus,
    ConfigurationError,
    Settings,
    displayable,
    error,
    load_settings,
    make_console,
)
from modules.file_operator import FileOperator, Menu


def get_audit_logger(settings: Settings) -> Optional[AuditLogger]:
    """Get the audit logger, or None when auditing is off."""
    if settings.audit_log is None:
        return None
    return AuditLogger(log_path=settings.audit_log)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="fileops")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML settings file.",
)
@click.pass_context
def fileops(ctx, config_path: Optional[str]):
    """
    fileops - list, search, copy, move and delete files.

    Run without a command to start the interactive menu.
    """
    try:
        settings = load_settings(config_path)
    except ConfigurationError as e:
        Console(stderr=True).print(error(str(e)))
        ctx.exit(1)

    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        console = make_console(settings)
        operator = FileOperator(console=console, logger=get_audit_logger(settings))
        Menu(operator, console=console).run()


@fileops.command()
@click.option("--limit", default=20, show_default=True, help="Number of entries to show.")
@click.option("--failed", is_flag=True, help="Only show failed operations.")
@click.pass_obj
def audit(settings: Settings, limit: int, failed: bool):
    """View the audit log."""
    console = make_console(settings)
    logger = get_audit_logger(settings)

    if logger is None:
        console.print("[dim]Auditing is off. Set 'audit_log' in the config file to enable it.[/dim]")
        return

    entries = logger.get_failed(limit=limit) if failed else logger.get_recent(limit=limit)

    if not entries:
        console.print("[dim]No audit entries found.[/dim]")
        return

    table = Table(title="Recent Audit Log")
    table.add_column("Time", style="dim")
    table.add_column("Operation")
    table.add_column("Description")
    table.add_column("Status")
    table.add_column("Result")

    for entry in entries:
        time_str = entry.timestamp.split("T")[1].split(".")[0] if "T" in entry.timestamp else entry.timestamp

        status_str = entry.status
        if entry.status == ActionStatus.EXECUTED.value:
            status_str = f"[green]{entry.status}[/green]"
        elif entry.status == ActionStatus.FAILED.value:
            status_str = f"[red]{entry.status}[/red]"

        description = entry.action_description
        if len(description) > 50:
            description = description[:50] + "..."

        table.add_row(
            time_str,
            entry.action_type,
            escape(displayable(description)),
            status_str,
            escape(displayable(entry.result or "")),
        )

    console.print(table)


if __name__ == "__main__":
    fileops()
