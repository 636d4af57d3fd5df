"""Mini README: What-if projections over a filtered ledger.

Structure:
    * parse_adjustments - reads ``Food=-0.5,Salary=0.1`` style deltas.
    * parse_removals - reads comma-separated tags excluded from projections.
    * Projection - original transactions alongside their projected copies.
    * build_projection - derives the projected sequence.

Each transaction is projected independently:

1. Transactions carrying a removed tag (any casing) are left out.
2. An inline projected amount replaces the magnitude, keeping the sign.
3. Otherwise the first tag, in written order, with an adjustment scales the
   amount by ``1 + delta``. Adjustment tags are matched exactly.
4. Anything else is copied unchanged.

Removal only shapes the projected view; the original sequence is returned
untouched so comparisons show removed tags explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple, Union

from ..ledger.models import Transaction
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def parse_adjustments(spec: Optional[str]) -> Dict[str, float]:
    """Parse ``tag=fraction`` pairs, skipping malformed entries."""

    adjustments: Dict[str, float] = {}
    if not spec:
        return adjustments
    for entry in spec.split(","):
        if not entry.strip():
            continue
        parts = entry.split("=", 1)
        if len(parts) != 2:
            LOGGER.debug("Skipping adjustment without '=': %r", entry)
            continue
        tag, raw_delta = parts
        # float() would also accept digit separators such as 1_0.
        if "_" in raw_delta:
            LOGGER.debug("Skipping adjustment with invalid fraction: %r", entry)
            continue
        try:
            delta = float(raw_delta.strip())
        except ValueError:
            LOGGER.debug("Skipping adjustment with invalid fraction: %r", entry)
            continue
        adjustments[tag.strip()] = delta
    return adjustments


def parse_removals(spec: Optional[str]) -> FrozenSet[str]:
    """Parse comma-separated tag names into a casefolded set."""

    if not spec:
        return frozenset()
    return frozenset(
        tag.strip().casefold() for tag in spec.split(",") if tag.strip()
    )


@dataclass(frozen=True, slots=True)
class Projection:
    """Original transactions alongside their projected counterparts."""

    original: Tuple[Transaction, ...]
    projected: Tuple[Transaction, ...]
    adjustments: Mapping[str, float] = field(default_factory=dict)
    removals: FrozenSet[str] = frozenset()

    @property
    def removed_count(self) -> int:
        return len(self.original) - len(self.projected)


def project_transaction(
    transaction: Transaction,
    adjustments: Mapping[str, float],
    removals: FrozenSet[str],
) -> Optional[Transaction]:
    """Return the projected copy of one transaction, or None when removed."""

    if removals and transaction.has_any_tag(removals):
        return None
    if transaction.projected_amount is not None:
        return transaction.with_amount(transaction.sign * transaction.projected_amount)
    for tag in transaction.tags:
        if tag in adjustments:
            return transaction.with_amount(transaction.amount * (1.0 + adjustments[tag]))
    return transaction.with_amount(transaction.amount)


def build_projection(
    original: Iterable[Transaction],
    adjustments: Union[str, Mapping[str, float], None] = None,
    removals: Union[str, Iterable[str], None] = None,
) -> Projection:
    """Derive the projected sequence from ``original``.

    ``adjustments`` and ``removals`` accept either the raw option strings or
    values already produced by :func:`parse_adjustments` and
    :func:`parse_removals`.
    """

    if adjustments is None or isinstance(adjustments, str):
        adjustment_map = parse_adjustments(adjustments)
    else:
        adjustment_map = dict(adjustments)
    if removals is None or isinstance(removals, str):
        removal_set = parse_removals(removals)
    else:
        removal_set = frozenset(tag.strip().casefold() for tag in removals if tag.strip())

    baseline = tuple(original)
    projected = []
    for transaction in baseline:
        copy = project_transaction(transaction, adjustment_map, removal_set)
        if copy is not None:
            projected.append(copy)

    projection = Projection(
        original=baseline,
        projected=tuple(projected),
        adjustments=adjustment_map,
        removals=removal_set,
    )
    LOGGER.info(
        "Built projection with %s adjustments, removed %s of %s transactions",
        len(adjustment_map),
        projection.removed_count,
        len(baseline),
    )
    return projection
