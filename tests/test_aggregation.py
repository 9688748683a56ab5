"""Tests for nutrient aggregation."""

import logging
from uuid import uuid4

import pytest

from diet_tracker.domain.nutrients import Nutrient, default_config
from diet_tracker.services.aggregation import aggregate_entries
from tests.conftest import make_entry, make_food

NUTRIENTS = default_config().nutrients


def test_portion_multiplier_scales_amounts() -> None:
    user_id = uuid4()
    oats = make_food("Oats", calories=150, fiber=4)
    entries = [
        make_entry(user_id, oats.id, portion_multiplier=1.5),
        make_entry(user_id, oats.id),
    ]

    totals = aggregate_entries(entries, {oats.id: oats.profile}, NUTRIENTS, days=1)

    assert totals.daily[Nutrient.FIBER] == pytest.approx(10.0)
    assert totals.total_calories == pytest.approx(375.0)
    assert totals.entry_count == 2


def test_daily_amounts_divide_by_period_length() -> None:
    user_id = uuid4()
    salmon = make_food("Salmon", calories=208, protein=35)
    entries = [make_entry(user_id, salmon.id)]

    totals = aggregate_entries(
        entries, {salmon.id: salmon.profile}, NUTRIENTS, days=7
    )

    assert totals.daily[Nutrient.PROTEIN] == pytest.approx(5.0)
    assert totals.total_calories == pytest.approx(208.0)


def test_unknown_foods_are_skipped_and_counted(caplog, monkeypatch) -> None:
    monkeypatch.setattr(logging.getLogger("diet_tracker"), "propagate", True)
    user_id = uuid4()
    rice = make_food("Rice", calories=130, carbohydrates=28)
    entries = [make_entry(user_id, rice.id), make_entry(user_id, uuid4())]

    with caplog.at_level(logging.WARNING, logger="diet_tracker"):
        totals = aggregate_entries(
            entries, {rice.id: rice.profile}, NUTRIENTS, days=1
        )

    assert totals.entry_count == 1
    assert totals.skipped_entries == 1
    assert totals.daily[Nutrient.CARBOHYDRATES] == pytest.approx(28.0)
    assert "not found in catalog" in caplog.text


def test_missing_nutrients_count_as_zero() -> None:
    user_id = uuid4()
    water = make_food("Water")

    totals = aggregate_entries(
        [make_entry(user_id, water.id)], {water.id: water.profile}, NUTRIENTS, 1
    )

    assert all(amount == 0.0 for amount in totals.daily.values())
    assert set(totals.daily) == set(NUTRIENTS)
