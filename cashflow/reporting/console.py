"""Mini README: Plain-text rendering of computed cash-flow figures.

Structure:
    * render_transaction_line - one transaction as a listing row.
    * render_summary - listing, totals, per-tag totals and top expense tags.
    * render_side_by_side - original versus projected comparison.

Functions return strings so the CLI decides where they are written. Amounts
use two decimals and expenses are shown as positive spend.
"""

from __future__ import annotations

from typing import List, Sequence

from ..ledger.models import Transaction, tag_label
from .aggregator import (
    DEFAULT_TOP_N,
    ProjectionComparison,
    TagChangeStatus,
    TagImpact,
    high_impact_tags,
    sorted_tag_totals,
    summarise_totals,
    tag_totals,
)

UNDATED_LABEL = "----------"


def render_transaction_line(transaction: Transaction) -> str:
    occurred_on = transaction.occurred_on.isoformat() if transaction.occurred_on else UNDATED_LABEL
    return (
        f"{occurred_on} [{transaction.kind.value}] {transaction.amount:.2f} - "
        f"{transaction.description} [{', '.join(transaction.tags)}]"
    )


def render_high_impact(impacts: Sequence[TagImpact]) -> List[str]:
    """Render the top expense tag block, empty when there are no expenses."""

    if not impacts:
        return []
    lines = ["💸 Top Expense Tags (High Impact):"]
    for impact in impacts:
        lines.append(
            f"  [{tag_label(impact.tag)}] Total: {impact.total:.2f} | "
            f"Count: {impact.count} | Avg: {impact.average:.2f}"
        )
    lines.append("")
    return lines


def render_summary(transactions: Sequence[Transaction], top_n: int = DEFAULT_TOP_N) -> str:
    """Render the filtered ledger listing followed by its aggregates."""

    lines = ["📊 Filtered Cash Flow Summary:"]
    lines.extend(render_transaction_line(transaction) for transaction in transactions)

    totals = summarise_totals(transactions)
    lines.append("")
    lines.append(f"Total Income:   {totals.income:.2f}")
    lines.append(f"Total Expenses: {-totals.expenses:.2f}")
    lines.append(f"Net:            {totals.net:.2f}")
    lines.append("")

    lines.append("📌 Totals by Tag:")
    for tag, total in sorted_tag_totals(tag_totals(transactions)):
        category = "Expense" if total < 0 else "Income"
        lines.append(f"  [{tag_label(tag)}] {category}: {total:.2f}")
    lines.append("")

    lines.extend(render_high_impact(high_impact_tags(transactions, top_n)))
    return "\n".join(lines) + "\n"


def render_side_by_side(comparison: ProjectionComparison) -> str:
    """Render original → projected totals and the tag changes between them."""

    original = comparison.original_totals
    projected = comparison.projected_totals
    lines = [
        "📊 Side-by-Side Summary (Original → Projected)",
        "",
        f"  Income:    {original.income:8.2f}  →  {projected.income:8.2f}",
        f"  Expenses:  {-original.expenses:8.2f}  →  {-projected.expenses:8.2f}",
        f"  Net:       {original.net:8.2f}  →  {projected.net:8.2f}",
        "",
        "🔍 Tag Changes:",
    ]
    for change in comparison.tag_changes:
        label = tag_label(change.tag)
        if change.status is TagChangeStatus.ADDED:
            lines.append(f"  [{label}] added:    {change.projected:.2f}")
        elif change.status is TagChangeStatus.REMOVED:
            lines.append(f"  [{label}] removed:  {change.original:.2f}")
        else:
            lines.append(f"  [{label}] changed:  {change.original:.2f} → {change.projected:.2f}")
    return "\n".join(lines) + "\n"
