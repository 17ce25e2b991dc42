"""Domain models for the lido pricing engine."""

from lido.models.breakdown import (
    Breakdown,
    BreakdownEntry,
    EntranceTotals,
    Flat,
    PerPeriod,
    PerRow,
    Quote,
    Totals,
)
from lido.models.enums import (
    DISCOUNT_KEY,
    ErrorField,
    ErrorKind,
    RowState,
    Section,
)
from lido.models.rows import (
    MinMaxWindow,
    RowData,
    RowError,
    RowId,
    RowIssue,
    RowSet,
    can_add_row,
    new_row,
    row_has_data,
    row_state,
)
from lido.models.settings import Category, Period, Settings, default_settings

__all__ = [
    "DISCOUNT_KEY",
    "Breakdown",
    "BreakdownEntry",
    "Category",
    "EntranceTotals",
    "ErrorField",
    "ErrorKind",
    "Flat",
    "MinMaxWindow",
    "PerPeriod",
    "PerRow",
    "Period",
    "Quote",
    "RowData",
    "RowError",
    "RowId",
    "RowIssue",
    "RowSet",
    "RowState",
    "Section",
    "Settings",
    "Totals",
    "can_add_row",
    "default_settings",
    "new_row",
    "row_has_data",
    "row_state",
]
