"""Lido seasonal beach pricing engine.

Usage::

    from lido import RowSet, create_default_engine, find_min_max_dates

    engine = create_default_engine()
    window = find_min_max_dates(rows.permanenza)
    quote = engine.calculate_total(rows, window)
    quote.grand_total, quote.breakdown.to_mapping()
"""

from lido.dates import days_in_each_period, find_min_max_dates, inclusive_day_count
from lido.engine import PricingEngine, calculate_total
from lido.factory import create_default_engine
from lido.models.breakdown import (
    Breakdown,
    EntranceTotals,
    Flat,
    PerPeriod,
    PerRow,
    Quote,
    Totals,
)
from lido.models.enums import ErrorField, ErrorKind, RowState, Section
from lido.models.rows import MinMaxWindow, RowData, RowError, RowIssue, RowSet
from lido.models.settings import Category, Period, Settings, default_settings
from lido.validator import validate_rows

__version__ = "0.1.0"

__all__ = [
    "Breakdown",
    "Category",
    "EntranceTotals",
    "ErrorField",
    "ErrorKind",
    "Flat",
    "MinMaxWindow",
    "PerPeriod",
    "PerRow",
    "Period",
    "PricingEngine",
    "Quote",
    "RowData",
    "RowError",
    "RowIssue",
    "RowSet",
    "RowState",
    "Section",
    "Settings",
    "Totals",
    "calculate_total",
    "create_default_engine",
    "days_in_each_period",
    "default_settings",
    "find_min_max_dates",
    "inclusive_day_count",
    "validate_rows",
]
