"""Mini README: Export projection comparisons as Markdown reports.

Structure:
    * MarkdownReportExporter - renders and writes the projection report.

The report contains a summary table, the tag differences between the
original and projected ledgers, and the top expense tags of the original.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..ledger.models import tag_label
from ..logging_utils import get_logger
from .aggregator import ProjectionComparison

LOGGER = get_logger(__name__)

MISSING_CELL = "–"


def _cell(value) -> str:
    return MISSING_CELL if value is None else f"{value:.2f}"


class MarkdownReportExporter:
    """Persist projection comparisons to Markdown files."""

    title = "# 📊 Cash Flow Projection"

    def render(self, comparison: ProjectionComparison) -> str:
        """Return the full Markdown document for ``comparison``."""

        original = comparison.original_totals
        projected = comparison.projected_totals
        lines: List[str] = [
            self.title,
            "",
            "## Summary",
            "",
            "| Metric   | Original | Projected |",
            "|----------|----------|-----------|",
            f"| Income   | {original.income:.2f} | {projected.income:.2f} |",
            f"| Expenses | {-original.expenses:.2f} | {-projected.expenses:.2f} |",
            f"| Net      | {original.net:.2f} | {projected.net:.2f} |",
            "",
            "## Tag Differences",
            "",
            "| Tag | Original | Projected |",
            "|-----|----------|-----------|",
        ]
        for change in comparison.tag_changes:
            lines.append(
                f"| {tag_label(change.tag)} | {_cell(change.original)} | {_cell(change.projected)} |"
            )

        lines.extend(
            [
                "",
                "## 💸 Top Expense Tags (High Impact)",
                "",
                "| Tag | Total | Count | Avg per Transaction |",
                "|-----|-------|-------|---------------------|",
            ]
        )
        for impact in comparison.top_expense_tags:
            lines.append(
                f"| {tag_label(impact.tag)} | {impact.total:.2f} | {impact.count} | {impact.average:.2f} |"
            )
        return "\n".join(lines) + "\n"

    def export(self, comparison: ProjectionComparison, destination: Path) -> Path:
        """Write the report to ``destination``, creating parent directories."""

        destination = Path(destination)
        LOGGER.info(
            "Exporting projection report with %s tag changes to %s",
            len(comparison.tag_changes),
            destination,
        )
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("w", encoding="utf-8") as report_file:
            report_file.write(self.render(comparison))
        return destination
