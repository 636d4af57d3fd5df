"""Mini README: Entry point CLI for cash-flow summaries and projections.

This script exposes a Typer CLI that parses a ledger file, applies the
requested filters, prints a summary, and compares the ledger with a what-if
projection built from --adjust and --remove. The comparison can also be
exported as Markdown. Defaults come from ``CASHFLOW_*`` settings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from cashflow.configuration import get_settings
from cashflow.filtering import FilterCriteria, InvalidFilterDateError, apply_filters
from cashflow.ledger import LedgerReadError, load_ledger
from cashflow.logging_utils import configure_root_logger, get_logger
from cashflow.projection import build_projection
from cashflow.reporting import MarkdownReportExporter, compare_projection, render_side_by_side, render_summary

LOGGER = get_logger(__name__)

cli = typer.Typer(help="Summarise a cash-flow ledger and project what-if scenarios.")


@cli.command()
def report(
    file: Optional[Path] = typer.Option(None, "--file", help="Cashflow markdown file to process."),
    tag: Optional[str] = typer.Option(None, "--tag", help="Filter transactions by tag."),
    transaction_type: Optional[str] = typer.Option(
        None, "--type", help="Filter by type: income or expense."
    ),
    date_from: Optional[str] = typer.Option(None, "--from", help="Start date YYYY-MM-DD."),
    date_to: Optional[str] = typer.Option(None, "--to", help="End date YYYY-MM-DD."),
    remove: Optional[str] = typer.Option(
        None, "--remove", help="Comma-separated tags to remove from the projection."
    ),
    adjust: Optional[str] = typer.Option(
        None, "--adjust", help="Tag adjustments e.g. Food=-0.5,Salary=0.1."
    ),
    export_md: Optional[Path] = typer.Option(
        None, "--export-md", help="Export the side-by-side projection as a Markdown file."
    ),
    top: Optional[int] = typer.Option(
        None, "--top", min=1, help="Number of high-impact expense tags to list."
    ),
) -> None:
    """Print the filtered summary and the original → projected comparison."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    ledger_path = file or settings.default_ledger_file
    top_n = top or settings.top_expense_tags

    try:
        criteria = FilterCriteria.from_options(
            tag=tag,
            transaction_type=transaction_type,
            date_from=date_from,
            date_to=date_to,
        )
    except InvalidFilterDateError as error:
        LOGGER.debug("Rejected filter option: %s", error)
        typer.echo(f"Invalid {error.option_name} date format")
        raise typer.Exit(code=1) from error

    try:
        transactions = load_ledger(ledger_path)
    except LedgerReadError as error:
        typer.echo(f"Error: {error}")
        return

    transactions = apply_filters(transactions, criteria)
    typer.echo(render_summary(transactions, top_n))

    projection = build_projection(transactions, adjustments=adjust, removals=remove)
    comparison = compare_projection(projection, top_n)
    typer.echo(render_side_by_side(comparison))

    if export_md is not None:
        try:
            MarkdownReportExporter().export(comparison, export_md)
        except OSError as error:
            typer.echo(f"Error writing markdown: {error}")
        else:
            typer.echo(f"📁 Exported projection to: {export_md}")


if __name__ == "__main__":
    cli()
