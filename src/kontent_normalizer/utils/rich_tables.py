# ABOUTME: Rich table utilities for styled console summaries of normalization runs
# ABOUTME: Provides pre-configured table generators for results, failures and logging status

from typing import Any

from rich.box import ROUNDED
from rich.console import Console
from rich.table import Table

from kontent_normalizer.core.models import KontentOptions, NormalizationFailure, NormalizationResult


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a key-value table.

    Args:
        title: Table title with emoji/styling
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, width=None, no_wrap=False)
    table.add_column("Value", style=value_style, width=None, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_multi_column_table(
    title: str,
    columns: list[tuple[str, str]],
    rows: list[list[str]],
    title_style: str = "bold cyan",
    header_style: str = "bold magenta",
    alternate_row_styles: list[str] | None = None,
    box_style=ROUNDED,
) -> Table:
    """Create a multi-column table with zebra striping.

    Args:
        title: Table title with emoji/styling
        columns: List of (column_name, column_style) tuples
        rows: List of row data
        title_style: Style for the table title
        header_style: Style for column headers
        alternate_row_styles: Alternating row styles for zebra striping
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style=header_style,
        border_style="cyan",
        title_justify="left",
        row_styles=alternate_row_styles or ["", "dim"],
        expand=True,
    )

    for name, style in columns:
        table.add_column(name, style=style)

    for row in rows:
        table.add_row(*row)

    return table


def create_normalization_summary_table(result: NormalizationResult, options: KontentOptions) -> Table:
    """Create a summary table for one normalization run.

    Args:
        result: Output of the batch service
        options: Options the run was executed with

    Returns:
        Key-value table with entity counts and failure status
    """
    failure_count = len(result.failures)
    summary_data = {
        "🆔 Project": options.project_id or "Not set",
        "🌍 Environment": options.project_environment,
        "🗣️ Languages": ", ".join(options.language_codenames),
        "📐 Models": str(len(result.models)),
        "📄 Entries": str(len(result.entries)),
        "🖼️ Assets": str(len(result.assets)),
        "🚨 Failures": f"[bold red]{failure_count}[/bold red]" if failure_count else "[bold green]0[/bold green]",
    }

    return create_key_value_table(
        title="🔄 Normalization Summary",
        data=summary_data,
        title_style="bold green",
        key_style="cyan",
        value_style="white",
    )


def create_failures_table(failures: list[NormalizationFailure]) -> Table:
    """Create a table listing per-item failures.

    Args:
        failures: Failures collected by the batch service

    Returns:
        Styled multi-column failures table
    """
    columns = [
        ("Stage", "magenta"),
        ("Item", "cyan"),
        ("Type", "green"),
        ("Error Type", "yellow"),
        ("Error (truncated)", "dim white"),
    ]

    rows = []
    for failure in failures:
        error_short = (failure.error[:80] + "...") if len(failure.error) > 80 else failure.error
        rows.append(
            [
                failure.stage,
                failure.item_codename or failure.item_id or "-",
                failure.type_codename or "-",
                failure.error_type,
                error_short,
            ]
        )

    return create_multi_column_table(title="🚨 Normalization Failures", columns=columns, rows=rows)


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a logging configuration status table.

    Args:
        status: Logging status dictionary

    Returns:
        Styled logging configuration table
    """
    logging_data = {
        "🔧 Mode": status["mode"].title(),
        "📁 Log Directory": status["log_directory"] or "N/A (production mode)",
        "⚠️ Warnings Captured": "Yes" if status["captured_warnings"] else "No",
    }

    if status["log_files"]["main"]:
        logging_data["📝 Main Log"] = status["log_files"]["main"]
    if status["log_files"]["json"]:
        logging_data["📊 JSON Log"] = status["log_files"]["json"]
    if status["log_files"]["errors"]:
        logging_data["🚨 Error Log"] = status["log_files"]["errors"]

    return create_key_value_table(
        title="🔍 Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing.

    Args:
        console: Rich console instance
        table: Configured table to print
    """
    console.print()
    console.print(table)
    console.print()
