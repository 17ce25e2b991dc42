"""Editing helpers for the rate schedule.

These mirror the operations of the settings screen: changing how many
categories and periods the schedule has, and the date bounds each input
accepts. Every helper returns a new Settings; the argument is not modified.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING

from lido.models.enums import Section
from lido.models.settings import Category, Period

if TYPE_CHECKING:
    from lido.models.rows import MinMaxWindow
    from lido.models.settings import Settings


def resize_categories(settings: Settings, count: int) -> Settings:
    """Give every period exactly ``count`` categories.

    New categories are named after their position ('1', '2', ...) and start
    at price 0. Extra categories are dropped from the end of every period.
    """
    count = max(count, 0)
    periods: list[Period] = []
    for period in settings.periods:
        categories = [c.model_copy() for c in period.categories[:count]]
        for index in range(len(categories), count):
            categories.append(Category(id=index, name=str(index + 1), price=0.0))
        periods.append(period.model_copy(update={"categories": categories}))
    return settings.model_copy(update={"periods": periods})


def resize_periods(settings: Settings, count: int) -> Settings:
    """Change the number of periods.

    Growing requires the last period to have a start before the closing
    date; otherwise the schedule is returned unchanged. New periods have no
    start and copy the first period's category names at price 0.
    """
    current = settings.periods
    if count < len(current):
        return settings.model_copy(
            update={"periods": [p.model_copy() for p in current[: max(count, 0)]]}
        )
    if count == len(current):
        return settings

    if not current:
        return settings
    last_start = current[-1].start
    if (
        last_start is None
        or settings.closing_date is None
        or last_start >= settings.closing_date
    ):
        return settings

    template = current[0].categories
    periods = [p.model_copy() for p in current]
    for index in range(len(current), count):
        periods.append(
            Period(
                id=index,
                start=None,
                categories=[
                    Category(id=c.id, name=c.name, price=0.0) for c in template
                ],
            )
        )
    return settings.model_copy(update={"periods": periods})


def min_period_start(settings: Settings, index: int) -> date | None:
    """Earliest start date period ``index`` may take (day after the previous
    period's start). None for the first period or an unset predecessor.

    ``index == len(settings.periods)`` is accepted and gives the bound for the
    next period to be added; anything beyond that is None.
    """
    if index <= 0 or index > len(settings.periods):
        return None
    previous = settings.periods[index - 1].start
    if previous is None:
        return None
    return previous + timedelta(days=1)


def date_bounds(
    settings: Settings,
    section: Section,
    min_max: MinMaxWindow,
) -> tuple[date | None, date | None]:
    """Allowed (min, max) dates for a row in ``section``.

    Stays may span the whole season; extra rows are held to the current
    stay window.
    """
    if section == Section.PERMANENZA:
        first_start = settings.periods[0].start if settings.periods else None
        return first_start, settings.closing_date
    return min_max.from_, min_max.to
