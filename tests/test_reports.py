"""Mini README: Tests for console rendering and Markdown export.

Rendering is checked for the figures it shows rather than exact layout.
"""

from __future__ import annotations

from cashflow.ledger import parse_ledger
from cashflow.projection import build_projection
from cashflow.reporting import MarkdownReportExporter, compare_projection, render_side_by_side, render_summary


def _comparison():
    ledger = parse_ledger(
        [
            "# 2024-05-01",
            "+ 1000 Pay [Job]",
            "- 10 Lunch [Food] (8)",
            "- 40 Rent [Housing]",
            "- 5 Bus",
        ]
    )
    return ledger, compare_projection(build_projection(ledger, removals="housing"))


def test_render_summary_lists_transactions_and_totals() -> None:
    """The summary shows each entry, totals with positive spend and tag blocks."""

    ledger, _ = _comparison()

    text = render_summary(ledger)

    assert "2024-05-01 [expense] -10.00 - Lunch [Food]" in text
    assert "Total Income:   1000.00" in text
    assert "Total Expenses: 55.00" in text
    assert "Net:            945.00" in text
    assert "[_untagged_] Expense: -5.00" in text
    assert "[Housing] Total: -40.00 | Count: 1 | Avg: -40.00" in text


def test_render_summary_marks_undated_entries() -> None:
    (transaction,) = parse_ledger(["+ 5 Found coin"])

    assert "---------- [income] 5.00 - Found coin []" in render_summary([transaction])


def test_render_side_by_side_shows_tag_changes() -> None:
    """Removed and changed tags are listed with both sides."""

    _, comparison = _comparison()

    text = render_side_by_side(comparison)

    assert "[Food] changed:  -10.00 → -8.00" in text
    assert "[Housing] removed:  -40.00" in text
    assert "Job" not in text


def test_markdown_export_writes_report(tmp_path) -> None:
    """The exporter creates parent folders and writes all three tables."""

    _, comparison = _comparison()
    destination = tmp_path / "reports" / "projection.md"

    written = MarkdownReportExporter().export(comparison, destination)

    content = written.read_text(encoding="utf-8")
    assert written == destination
    assert content.startswith("# 📊 Cash Flow Projection")
    assert "| Expenses | 55.00 | 13.00 |" in content
    assert "| Housing | -40.00 | – |" in content
    assert "| Food | -10.00 | -8.00 |" in content
    assert "| Housing | -40.00 | 1 | -40.00 |" in content
