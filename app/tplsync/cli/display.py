"""Console reporting for sync runs.

Prints a line per prune or promote event as it happens and the final
run summary. The report is advisory; it never changes the run outcome.
"""

from rich.markup import escape
from rich.table import Table

from tplsync.sync.models import (
    Classification,
    CopyOutcome,
    DeleteResult,
    FileEntry,
    RunSummary,
    SyncResult,
)
from tplsync.utils.formatting import console, err_console


def print_result(result: SyncResult, quiet: bool = False) -> None:
    """Print one line for a prune or promote result.

    Failures always go to stderr. Quiet mode hides everything else.

    Args:
        result: Result of a single file operation.
        quiet: Suppress non-failure lines.
    """
    path = escape(str(result.entry.path))

    if isinstance(result, DeleteResult):
        if not result.success:
            reason = escape(result.error or "")
            err_console.print(f"[error]Failed to delete {path}:[/] {reason}", soft_wrap=True)
        elif not quiet:
            verb = "Would delete" if result.dry_run else "Deleted"
            console.print(f"[deleted]{verb}:[/] {path}", soft_wrap=True)
        return

    destination = escape(str(result.destination))
    if result.outcome == CopyOutcome.FAILED:
        reason = escape(result.error or "")
        err_console.print(
            f"[error]Failed to copy {path} to {destination}:[/] {reason}", soft_wrap=True
        )
    elif quiet:
        return
    elif result.outcome == CopyOutcome.COPIED:
        verb = "Would copy" if result.dry_run else "Copied"
        console.print(f"[copied]{verb}:[/] {path} to {destination}", soft_wrap=True)
    else:
        console.print(f"[skipped]Exists:[/] [muted]{destination}[/]", soft_wrap=True)


def print_run_summary(summary: RunSummary) -> None:
    """Print the final totals of a run.

    Args:
        summary: Summary returned by the sync run.
    """
    if summary.traversal_error is not None:
        err_console.print(
            f"[error]Error traversing directory:[/] {escape(str(summary.traversal_error))}",
            soft_wrap=True,
        )

    label = "Dry-run completed" if summary.dry_run else "Operation completed"
    console.print(
        f"\n{label}: [deleted]{summary.deleted_count} files deleted[/], "
        f"[copied]{summary.copied_count} files copied[/]",
        soft_wrap=True,
    )

    details: list[str] = []
    if summary.skipped_count:
        details.append(f"{summary.skipped_count} already present")
    if summary.ignored_count:
        details.append(f"{summary.ignored_count} non-PNG ignored")
    if details:
        console.print(f"[dim]({', '.join(details)})[/dim]")

    if summary.failures:
        console.print(f"[warning]{summary.failed_count} file(s) failed:[/]")
        for path, reason in summary.failures:
            console.print(f"  [muted]{escape(path)}[/] - {escape(reason)}", soft_wrap=True)


def create_classification_table(
    rows: list[tuple[FileEntry, Classification]],
    title: str = "Source Images",
) -> Table:
    """Create a Rich table listing scanned images and their classification.

    Args:
        rows: Pairs of scanned file and its classification.
        title: Table title.

    Returns:
        Rich Table configured for classification display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Action", width=9)
    table.add_column("File", no_wrap=True)
    table.add_column("Path", style="muted")

    for entry, classification in rows:
        if classification == Classification.EPHEMERAL:
            action = "[deleted]delete[/]"
        else:
            action = "[copied]promote[/]"
        table.add_row(action, escape(entry.name), escape(str(entry.path)))

    return table

