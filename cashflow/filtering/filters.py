"""Mini README: Filter engine narrowing a transaction sequence.

Structure:
    * InvalidFilterDateError - raised for unparseable --from/--to values.
    * parse_filter_date - converts optional ISO strings into dates.
    * FilterCriteria - immutable description of the active filters.
    * apply_filters - returns the matching transactions in input order.

Tag and type comparisons ignore case. Date bounds are inclusive, and an
undated transaction sorts before every real date.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from ..ledger.models import Transaction, TransactionKind
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class InvalidFilterDateError(ValueError):
    """Raised when a date filter option is not a valid YYYY-MM-DD string."""

    def __init__(self, option_name: str, value: str) -> None:
        super().__init__(f"Invalid {option_name} date format: {value!r}")
        self.option_name = option_name
        self.value = value


def parse_filter_date(value: Optional[str], option_name: str) -> Optional[date]:
    """Parse an optional ISO date, raising ``InvalidFilterDateError`` when malformed."""

    if not value:
        return None
    try:
        parsed = date.fromisoformat(value.strip())
    except ValueError as error:
        raise InvalidFilterDateError(option_name, value) from error
    # fromisoformat also accepts compact forms such as 20240501.
    if parsed.isoformat() != value.strip():
        raise InvalidFilterDateError(option_name, value)
    return parsed


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """Filters applied to the parsed ledger; unset fields impose no constraint."""

    tag: Optional[str] = None
    transaction_type: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None

    @classmethod
    def from_options(
        cls,
        *,
        tag: Optional[str] = None,
        transaction_type: Optional[str] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
    ) -> "FilterCriteria":
        """Build criteria from raw command-line strings."""

        return cls(
            tag=tag or None,
            transaction_type=transaction_type or None,
            date_from=parse_filter_date(date_from, "--from"),
            date_to=parse_filter_date(date_to, "--to"),
        )

    @property
    def is_empty(self) -> bool:
        return (
            self.tag is None
            and self.transaction_type is None
            and self.date_from is None
            and self.date_to is None
        )

    def matches(self, transaction: Transaction) -> bool:
        """Return True when the transaction satisfies every active filter."""

        if self.tag is not None and not transaction.has_tag(self.tag):
            return False
        if self.transaction_type is not None:
            try:
                wanted_kind = TransactionKind.from_str(self.transaction_type)
            except ValueError:
                return False
            if transaction.kind is not wanted_kind:
                return False
        occurred_on = transaction.occurred_on or date.min
        if self.date_from is not None and occurred_on < self.date_from:
            return False
        if self.date_to is not None and occurred_on > self.date_to:
            return False
        return True


def apply_filters(transactions: Iterable[Transaction], criteria: FilterCriteria) -> List[Transaction]:
    """Return the transactions matching ``criteria`` in their original order."""

    filtered = [transaction for transaction in transactions if criteria.matches(transaction)]
    LOGGER.info("Filters %s kept %s transactions", criteria, len(filtered))
    return filtered
