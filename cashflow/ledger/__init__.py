"""Mini README: Ledger records and the text parser that produces them.

The ``models`` module defines the immutable ``Transaction`` record and the
untagged bucket marker; ``parser`` reads the markdown-like ledger format.
"""

from .models import UNTAGGED, TagKey, Transaction, TransactionKind, Untagged, tag_label, tag_sort_key
from .parser import LedgerReadError, load_ledger, parse_ledger

__all__ = [
    "LedgerReadError",
    "TagKey",
    "Transaction",
    "TransactionKind",
    "UNTAGGED",
    "Untagged",
    "load_ledger",
    "parse_ledger",
    "tag_label",
    "tag_sort_key",
]
