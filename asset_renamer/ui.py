"""User interface components - tables, summaries, confirmations."""

from rich.console import Console
from rich.table import Table
from rich.prompt import Confirm

from asset_renamer.constants import CONSOLE_STYLES
from asset_renamer.core.file_conflicts import check_file_conflicts, is_conflict
from asset_renamer.core.operations import RenamePlan, RenameResult, RenameStatus, summarize_results

console = Console()


STATUS_STYLES = {
    RenameStatus.RENAMED: CONSOLE_STYLES['success'],
    RenameStatus.UNCHANGED: CONSOLE_STYLES['dim'],
    RenameStatus.OVERWRITTEN: CONSOLE_STYLES['warning'],
    RenameStatus.SKIPPED: CONSOLE_STYLES['dim'],
    RenameStatus.WOULD_RENAME: CONSOLE_STYLES['info'],
    RenameStatus.WOULD_CONFLICT: CONSOLE_STYLES['warning'],
}


def display_rename_plan(plans: list[RenamePlan], title: str = "Planned Renames"):
    """Display planned renames in a formatted table with conflict indicators."""
    table = Table(title=title)
    table.add_column("Current name", style="cyan", no_wrap=True)
    table.add_column("New name", style="green", no_wrap=True)
    table.add_column("Status", style="yellow")

    for plan in plans:
        if plan.is_noop:
            status = "✓ Already normalized"
        elif is_conflict(plan.source, plan.target):
            status = "  Exists 🔴"
        else:
            status = "→ Rename"

        table.add_row(plan.source.name, plan.target.name, status)

    console.print(table)

    conflicts = check_file_conflicts([(plan.source, plan.target) for plan in plans])
    if conflicts:
        console.print(f"[yellow]{len(conflicts)} target name(s) already exist[/yellow]")


def display_results(results: list[RenameResult], title: str = "Rename Results"):
    """Display per-entry outcomes followed by a summary line."""
    if not results:
        return

    table = Table(title=title)
    table.add_column("Original", style="cyan", no_wrap=True)
    table.add_column("Result", no_wrap=True)
    table.add_column("Status")

    for result in results:
        style = STATUS_STYLES.get(result.status, CONSOLE_STYLES['info'])
        new_name = result.target.name if result.target else "-"
        table.add_row(result.source.name, new_name, f"[{style}]{result.status}[/{style}]")

    console.print(table)
    console.print(format_summary(results))


def format_summary(results: list[RenameResult]) -> str:
    """One-line summary such as "2 renamed, 1 unchanged"."""
    counts = summarize_results(results)
    if not counts:
        return "[dim]Nothing to do[/dim]"
    parts = [f"{count} {status}" for status, count in counts.items()]
    return f"[{CONSOLE_STYLES['success']}]✓ {', '.join(parts)}[/{CONSOLE_STYLES['success']}]"


def display_completed_before_failure(results: list[RenameResult]):
    """List entries that were renamed before a batch aborted."""
    if not results:
        console.print("[dim]No entries were renamed before the failure[/dim]")
        return
    console.print(f"[yellow]{len(results)} entr{'y' if len(results) == 1 else 'ies'} "
                  f"processed before the failure (not rolled back):[/yellow]")
    for result in results:
        new_name = result.target.name if result.target else "-"
        console.print(f"  {result.source.name} → {new_name} ({result.status})")


def confirm_renames(count: int) -> bool:
    """Ask before renaming when previewing."""
    return Confirm.ask(f"Rename {count} entr{'y' if count == 1 else 'ies'}?", default=False)
