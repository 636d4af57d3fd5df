"""Mini README: Line parser turning ledger text into transactions.

Structure:
    * LedgerReadError - raised when the ledger file cannot be read.
    * parse_ledger - converts an iterable of text lines into transactions.
    * load_ledger - opens a ledger file and feeds ``parse_ledger``.

Ledger format::

    # 2024-05-01
    - 9.49 Coffee [Food, Dining] (5.20)
    + 1500 Salary [Job]

Date headings set the date applied to the following transaction lines.
Lines that match neither pattern, or whose numbers do not parse, are skipped
so free-form notes can live alongside the entries.
"""

from __future__ import annotations

import re
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from ..logging_utils import get_logger
from .models import Transaction

LOGGER = get_logger(__name__)

DATE_HEADING = re.compile(r"^#\s+(\d{4}-\d{2}-\d{2})$", re.ASCII)
TRANSACTION_LINE = re.compile(
    r"^([+-])\s*([\d.]+)\s+(.+?)(?:\s+\[([^\]]+)\])?(?:\s+\(([\d.]+)\))?$",
    re.ASCII,
)


class LedgerReadError(OSError):
    """Raised when a ledger file cannot be opened or decoded."""


def _parse_number(text: Optional[str]) -> Optional[float]:
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _split_tags(raw: Optional[str]) -> Tuple[str, ...]:
    # "[Food,]" keeps a trailing empty tag, matching what was written.
    if not raw:
        return ()
    return tuple(part.strip() for part in raw.split(","))


def _parse_transaction(line: str, current_date: Optional[date]) -> Optional[Transaction]:
    """Build a transaction from a single line or return None when it does not parse."""

    match = TRANSACTION_LINE.match(line)
    if match is None:
        return None
    sign, magnitude, description, raw_tags, raw_projected = match.groups()
    amount = _parse_number(magnitude)
    if amount is None:
        return None
    if sign == "-":
        amount = -amount
    return Transaction(
        occurred_on=current_date,
        amount=amount,
        description=description.strip(),
        tags=_split_tags(raw_tags),
        projected_amount=_parse_number(raw_projected),
    )


def parse_ledger(lines: Iterable[str]) -> List[Transaction]:
    """Parse ledger lines into transactions, preserving input order."""

    transactions: List[Transaction] = []
    current_date: Optional[date] = None
    skipped = 0

    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            continue

        heading = DATE_HEADING.match(line)
        if heading:
            try:
                current_date = date.fromisoformat(heading.group(1))
            except ValueError:
                LOGGER.debug("Ignoring invalid date heading %r", line)
            continue

        transaction = _parse_transaction(line, current_date)
        if transaction is None:
            skipped += 1
            continue
        transactions.append(transaction)

    LOGGER.debug("Parsed %s transactions, skipped %s lines", len(transactions), skipped)
    return transactions


def load_ledger(path: Union[str, Path]) -> List[Transaction]:
    """Read and parse a ledger file, wrapping I/O failures in ``LedgerReadError``."""

    ledger_path = Path(path)
    LOGGER.info("Loading ledger from %s", ledger_path)
    try:
        with ledger_path.open("r", encoding="utf-8") as ledger_file:
            return parse_ledger(ledger_file)
    except UnicodeDecodeError as error:
        raise LedgerReadError(f"{ledger_path}: not valid UTF-8 text") from error
    except OSError as error:
        reason = error.strerror or str(error)
        raise LedgerReadError(f"open {ledger_path}: {reason}") from error
