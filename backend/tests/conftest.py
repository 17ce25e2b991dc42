"""Shared fixtures: the two-period schedule used across the suite."""

from __future__ import annotations

from datetime import date

import pytest

from lido.models.settings import Category, Period, Settings


@pytest.fixture()
def august_settings() -> Settings:
    """Two periods in August 2021: category '1' at 5/day, then 3/day."""
    return Settings(
        periods=[
            Period(
                id=0,
                start=date(2021, 8, 1),
                categories=[Category(id=0, name="1", price=5.0)],
            ),
            Period(
                id=1,
                start=date(2021, 8, 15),
                categories=[Category(id=0, name="1", price=3.0)],
            ),
        ],
        price_entrance=5.0,
        price_booth=5.0,
        closing_date=date(2021, 8, 31),
        price_discount=5.0,
        days_no_discount=15,
    )


@pytest.fixture()
def flat_settings() -> Settings:
    """One period for all of August, two categories (10/day and 7/day)."""
    return Settings(
        periods=[
            Period(
                id=0,
                start=date(2021, 8, 1),
                categories=[
                    Category(id=0, name="1", price=10.0),
                    Category(id=1, name="2", price=7.0),
                ],
            ),
        ],
        price_entrance=4.0,
        price_booth=6.0,
        closing_date=date(2021, 8, 31),
        price_discount=2.0,
        days_no_discount=15,
    )
