"""Mini README: Aggregation and report rendering for parsed ledgers.

``aggregator`` computes totals, tag breakdowns and projection comparisons.
``console`` and ``markdown_exporter`` turn those figures into text without
recomputing anything, so both outputs always agree.
"""

from .aggregator import (
    CashflowTotals,
    ProjectionComparison,
    TagChange,
    TagChangeStatus,
    TagImpact,
    compare_projection,
    diff_tag_totals,
    high_impact_tags,
    sorted_tag_totals,
    summarise_totals,
    tag_totals,
)
from .console import render_side_by_side, render_summary
from .markdown_exporter import MarkdownReportExporter

__all__ = [
    "CashflowTotals",
    "MarkdownReportExporter",
    "ProjectionComparison",
    "TagChange",
    "TagChangeStatus",
    "TagImpact",
    "compare_projection",
    "diff_tag_totals",
    "high_impact_tags",
    "render_side_by_side",
    "render_summary",
    "sorted_tag_totals",
    "summarise_totals",
    "tag_totals",
]
