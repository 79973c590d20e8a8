"""Rich display functions for dumpster results and contents."""

from rich.markup import escape
from rich.table import Table

from yeet.dumpster.models import DumpsterActionResult, DumpsterEntry, Verb
from yeet.utils.formatting import console, print_failure, print_info, print_success


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string."""
    if size_bytes is None:
        return "-"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"


def create_contents_table(entries: list[DumpsterEntry]) -> Table:
    """Create a Rich table listing dumpster entries.

    Args:
        entries: Entries to display.

    Returns:
        Rich Table with Dumpster Path, Restores To and Size columns.
    """
    table = Table(
        title="Dumpster Contents",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Dumpster Path", style="path.dumpster", overflow="fold")
    table.add_column("Restores To", style="path.home", overflow="fold")
    table.add_column("Size", style="info", justify="right", width=10)

    for entry in entries:
        dumpster_path = escape(entry.dumpster_path)
        if entry.is_dir:
            dumpster_path += "/"
        table.add_row(dumpster_path, escape(entry.original_path), format_size(entry.size_bytes))

    return table


def print_contents(entries: list[DumpsterEntry]) -> None:
    """Print the dumpster contents, or a notice when it is empty."""
    if not entries:
        print_info("The dumpster is empty.")
        return

    console.print(create_contents_table(entries))
    total = sum(e.size_bytes or 0 for e in entries)
    console.print(f"\n[muted]{len(entries)} entries ({format_size(total)} total)[/muted]")


def print_results(results: list[DumpsterActionResult], quiet: bool = False) -> None:
    """Report per-item results.

    Failures always go to stderr; successes are printed unless ``quiet``.

    Args:
        results: Results to report, in processing order.
        quiet: Suppress success output.
    """
    for result in results:
        if result.failed:
            print_failure(result.argument, result.error or "Unknown error")
        elif not quiet and result.verb != Verb.EMPTY:
            console.print(
                f"[muted]{result.verb.value}[/muted] {escape(result.argument)} "
                f"[muted]->[/muted] {escape(result.destination or '')}",
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )

    if quiet:
        return

    empty_results = [r for r in results if r.verb == Verb.EMPTY]
    if empty_results:
        removed = sum(1 for r in empty_results if r.success)
        failed = len(empty_results) - removed
        if failed:
            console.print(
                f"\n[success]{removed} removed[/success], [error]{failed} failed[/error]"
            )
        else:
            print_success(f"Dumpster emptied ({removed} entries removed).")
