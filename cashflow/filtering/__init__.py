"""Mini README: Filtering helpers for parsed ledgers.

Exposes ``FilterCriteria`` and ``apply_filters`` so the CLI can narrow a
ledger by tag, type and inclusive date range before reporting.
"""

from .filters import FilterCriteria, InvalidFilterDateError, apply_filters, parse_filter_date

__all__ = ["FilterCriteria", "InvalidFilterDateError", "apply_filters", "parse_filter_date"]
