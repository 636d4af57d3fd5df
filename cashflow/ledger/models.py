"""Mini README: Core ledger records shared by every pipeline stage.

Structure:
    * TransactionKind - enum representing income versus expense entries.
    * Untagged - marker enum whose single member keys tagless transactions.
    * Transaction - immutable dataclass describing one ledger line.
    * tag_label / tag_sort_key - helpers for displaying and ordering tag keys.

Transactions are created once by the parser and never mutated. Later stages
derive new records through ``Transaction.with_amount`` which copies the entry.
The transaction kind is computed from the sign of the amount on every access
so it can never drift from the amount.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Optional, Tuple, Union


class TransactionKind(str, Enum):
    """Enumerate the supported transaction categories."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionKind":
        """Coerce arbitrary casing into a valid transaction kind."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error


class Untagged(Enum):
    """Aggregation bucket for transactions without tags.

    Not a ``str`` subclass: the member never equals a tag string, including
    one literally named ``_untagged_``.
    """

    UNTAGGED = "_untagged_"

    def __str__(self) -> str:
        return self.value


UNTAGGED = Untagged.UNTAGGED

TagKey = Union[str, Untagged]


def tag_label(tag: TagKey) -> str:
    """Return the display label for a tag key."""

    return str(tag)


def tag_sort_key(tag: TagKey) -> Tuple[str, bool]:
    """Order tag keys lexicographically by label, real tags before the marker."""

    return (tag_label(tag), isinstance(tag, Untagged))


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a ledger entry with an optional projected magnitude."""

    occurred_on: Optional[date]
    amount: float
    description: str
    tags: Tuple[str, ...] = ()
    projected_amount: Optional[float] = None

    @property
    def kind(self) -> TransactionKind:
        """Income for non-negative amounts, expense otherwise."""

        return TransactionKind.INCOME if self.amount >= 0 else TransactionKind.EXPENSE

    @property
    def sign(self) -> int:
        return -1 if self.amount < 0 else 1

    def has_tag(self, tag: str) -> bool:
        """Case-insensitive membership test used by filters."""

        wanted = tag.casefold()
        return any(existing.casefold() == wanted for existing in self.tags)

    def has_any_tag(self, folded_tags: frozenset) -> bool:
        """Return True when any tag appears in a set of casefolded names."""

        return any(existing.casefold() in folded_tags for existing in self.tags)

    def with_amount(self, amount: float) -> "Transaction":
        """Return a copy of the transaction carrying a different amount."""

        return replace(self, amount=amount)
