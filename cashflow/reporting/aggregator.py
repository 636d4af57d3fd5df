"""Mini README: Aggregations over any transaction sequence.

Structure:
    * CashflowTotals - income, expenses and net for a sequence.
    * TagImpact - per-tag expense statistics used for high-impact ranking.
    * TagChangeStatus / TagChange - classified differences between tag totals.
    * ProjectionComparison - everything a report needs about a projection.
    * summarise_totals, tag_totals, sorted_tag_totals, high_impact_tags,
      diff_tag_totals, compare_projection - the aggregation functions.

All functions are pure. A transaction carrying several tags contributes its
full amount to each tag, and tagless transactions land in the ``UNTAGGED``
bucket. Tag keys keep the casing used in the ledger.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from ..ledger.models import UNTAGGED, TagKey, Transaction, tag_sort_key
from ..logging_utils import get_logger
from ..projection.builder import Projection

LOGGER = get_logger(__name__)

DEFAULT_TOP_N = 10


@dataclass(frozen=True, slots=True)
class CashflowTotals:
    """Income and expense sums; ``expenses`` is negative or zero."""

    income: float = 0.0
    expenses: float = 0.0

    @property
    def net(self) -> float:
        return self.income + self.expenses


@dataclass(frozen=True, slots=True)
class TagImpact:
    """Expense statistics for a single tag."""

    tag: TagKey
    total: float
    count: int

    @property
    def average(self) -> float:
        """Average amount per transaction carrying the tag."""

        return self.total / self.count


class TagChangeStatus(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"


@dataclass(frozen=True, slots=True)
class TagChange:
    """Difference for one tag between two tag total mappings."""

    tag: TagKey
    status: TagChangeStatus
    original: Optional[float]
    projected: Optional[float]


@dataclass(frozen=True, slots=True)
class ProjectionComparison:
    """Computed figures shared by the console and markdown reports."""

    original_totals: CashflowTotals
    projected_totals: CashflowTotals
    tag_changes: Tuple[TagChange, ...]
    top_expense_tags: Tuple[TagImpact, ...]


def _tag_keys(transaction: Transaction) -> Tuple[TagKey, ...]:
    return transaction.tags if transaction.tags else (UNTAGGED,)


def summarise_totals(transactions: Iterable[Transaction]) -> CashflowTotals:
    """Sum income (amounts >= 0) and expenses (amounts < 0) separately."""

    income = 0.0
    expenses = 0.0
    for transaction in transactions:
        if transaction.amount >= 0:
            income += transaction.amount
        else:
            expenses += transaction.amount
    return CashflowTotals(income=income, expenses=expenses)


def tag_totals(transactions: Iterable[Transaction]) -> Dict[TagKey, float]:
    """Sum amounts per tag, using ``UNTAGGED`` for tagless transactions."""

    totals: Dict[TagKey, float] = {}
    for transaction in transactions:
        for tag in _tag_keys(transaction):
            totals[tag] = totals.get(tag, 0.0) + transaction.amount
    return totals


def sorted_tag_totals(totals: Mapping[TagKey, float]) -> List[Tuple[TagKey, float]]:
    """Return tag totals ordered lexicographically by tag label."""

    return sorted(totals.items(), key=lambda item: tag_sort_key(item[0]))


def high_impact_tags(transactions: Iterable[Transaction], top_n: int = DEFAULT_TOP_N) -> List[TagImpact]:
    """Rank expense tags by total, most negative first, returning at most ``top_n``."""

    sums: Dict[TagKey, float] = {}
    counts: Dict[TagKey, int] = {}
    for transaction in transactions:
        if transaction.amount >= 0:
            continue
        for tag in _tag_keys(transaction):
            sums[tag] = sums.get(tag, 0.0) + transaction.amount
            counts[tag] = counts.get(tag, 0) + 1

    impacts = [TagImpact(tag=tag, total=total, count=counts[tag]) for tag, total in sums.items()]
    impacts.sort(key=lambda impact: (impact.total, tag_sort_key(impact.tag)))
    return impacts[: max(top_n, 0)]


def diff_tag_totals(first: Mapping[TagKey, float], second: Mapping[TagKey, float]) -> List[TagChange]:
    """Classify tags as added, removed or changed between two mappings.

    Tags present in both mappings with equal totals are omitted.
    """

    changes: List[TagChange] = []
    for tag in sorted(set(first) | set(second), key=tag_sort_key):
        original = first.get(tag)
        projected = second.get(tag)
        if original is None:
            changes.append(TagChange(tag, TagChangeStatus.ADDED, None, projected))
        elif projected is None:
            changes.append(TagChange(tag, TagChangeStatus.REMOVED, original, None))
        elif original != projected:
            changes.append(TagChange(tag, TagChangeStatus.CHANGED, original, projected))
    return changes


def compare_projection(projection: Projection, top_n: int = DEFAULT_TOP_N) -> ProjectionComparison:
    """Aggregate both sides of a projection for side-by-side reporting."""

    changes = diff_tag_totals(tag_totals(projection.original), tag_totals(projection.projected))
    LOGGER.debug("Projection comparison found %s tag changes", len(changes))
    return ProjectionComparison(
        original_totals=summarise_totals(projection.original),
        projected_totals=summarise_totals(projection.projected),
        tag_changes=tuple(changes),
        top_expense_tags=tuple(high_impact_tags(projection.original, top_n)),
    )
