"""Mini README: Tests for totals, tag breakdowns and tag differences.

These tests check that income and expenses are summed separately, that
multi-tag transactions count in full towards each tag, that the untagged
bucket never collides with a real tag, and that rankings and diffs are
ordered deterministically.
"""

from __future__ import annotations

from datetime import date

import pytest

from cashflow.ledger import UNTAGGED, Transaction, parse_ledger
from cashflow.projection import build_projection
from cashflow.reporting import (
    TagChangeStatus,
    compare_projection,
    diff_tag_totals,
    high_impact_tags,
    sorted_tag_totals,
    summarise_totals,
    tag_totals,
)


def _txn(amount: float, *tags: str) -> Transaction:
    return Transaction(occurred_on=date(2024, 5, 1), amount=amount, description="entry", tags=tags)


def test_summarise_totals_splits_income_and_expenses() -> None:
    """Expenses stay negative and net is their sum with income."""

    totals = summarise_totals([_txn(100.0, "Job"), _txn(-30.0, "Food"), _txn(0.0), _txn(-5.5)])

    assert totals.income == pytest.approx(100.0)
    assert totals.expenses == pytest.approx(-35.5)
    assert totals.net == pytest.approx(64.5)


def test_aggregation_is_repeatable() -> None:
    """Aggregating the same sequence twice yields identical figures."""

    ledger = tuple(parse_ledger(["+ 10 A [X]", "- 4 B [Y, X]", "- 1 C"]))

    assert summarise_totals(ledger) == summarise_totals(ledger)
    assert tag_totals(ledger) == tag_totals(ledger)


def test_multi_tag_transactions_count_fully_for_each_tag() -> None:
    """A -20 entry tagged A and B adds -20 to both buckets."""

    totals = tag_totals([_txn(-20.0, "A", "B")])

    assert totals == {"A": pytest.approx(-20.0), "B": pytest.approx(-20.0)}


def test_untagged_bucket_is_distinct_from_real_tags() -> None:
    """Tagless entries use the marker, even next to a tag named '_untagged_'."""

    totals = tag_totals([_txn(-1.0), _txn(-2.0, "_untagged_"), _txn(-4.0, "untagged")])

    assert totals[UNTAGGED] == pytest.approx(-1.0)
    assert totals["_untagged_"] == pytest.approx(-2.0)
    assert totals["untagged"] == pytest.approx(-4.0)
    assert len(totals) == 3


def test_tag_keys_preserve_case_and_sort_lexicographically() -> None:
    """Tags differing only in case stay separate and sort by label."""

    totals = tag_totals([_txn(-1.0, "food"), _txn(-2.0, "Food"), _txn(3.0, "Bonus"), _txn(-4.0)])

    assert [tag for tag, _ in sorted_tag_totals(totals)] == ["Bonus", "Food", UNTAGGED, "food"]


def test_high_impact_tags_rank_most_negative_first() -> None:
    """Totals of -100, -5 and -50 are ranked -100, -50, -5; income is ignored."""

    ledger = [
        _txn(-60.0, "Rent"),
        _txn(-40.0, "Rent"),
        _txn(-5.0, "Coffee"),
        _txn(-50.0, "Food"),
        _txn(500.0, "Food"),
    ]

    impacts = high_impact_tags(ledger, top_n=10)

    assert [impact.tag for impact in impacts] == ["Rent", "Food", "Coffee"]
    assert [impact.total for impact in impacts] == pytest.approx([-100.0, -50.0, -5.0])
    assert impacts[0].count == 2
    assert impacts[0].average == pytest.approx(-50.0)


def test_high_impact_tags_respects_top_n() -> None:
    """Only the requested number of tags are returned."""

    ledger = [_txn(-float(value), f"T{value}") for value in range(1, 6)]

    impacts = high_impact_tags(ledger, top_n=2)

    assert [impact.tag for impact in impacts] == ["T5", "T4"]


def test_diff_tag_totals_classifies_changes() -> None:
    """Added, removed and changed tags are reported; unchanged ones are not."""

    changes = diff_tag_totals(
        {"Food": -30.0, "Rent": -100.0, "Job": 200.0},
        {"Food": -15.0, "Job": 200.0, "New": -1.0},
    )

    assert [(change.tag, change.status) for change in changes] == [
        ("Food", TagChangeStatus.CHANGED),
        ("New", TagChangeStatus.ADDED),
        ("Rent", TagChangeStatus.REMOVED),
    ]
    assert changes[1].original is None
    assert changes[2].projected is None


def test_compare_projection_keeps_original_totals_when_removing() -> None:
    """Removal changes projected totals while the original side stays intact."""

    ledger = parse_ledger(["+ 100 Pay [Job]", "- 10 Lunch [Food]", "- 40 Rent [Housing]"])

    comparison = compare_projection(build_projection(ledger, removals="Food"), top_n=10)

    assert comparison.original_totals.expenses == pytest.approx(-50.0)
    assert comparison.projected_totals.expenses == pytest.approx(-40.0)
    assert [(change.tag, change.status) for change in comparison.tag_changes] == [
        ("Food", TagChangeStatus.REMOVED)
    ]
    assert [impact.tag for impact in comparison.top_expense_tags] == ["Housing", "Food"]
