"""Validation of extra rows (entrances, private booth) against declared stays.

An extra row is legal only if its start falls inside the stay window and
its whole range fits inside a single stay row. Gaps between stays are not
bridged: two adjacent stays that together cover a range do not make it
valid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from lido.models.enums import ErrorField, ErrorKind, Section
from lido.models.rows import RowError, RowIssue

if TYPE_CHECKING:
    from datetime import date

    from lido.models.rows import MinMaxWindow, RowData, RowSet

OUT_OF_RANGE_MESSAGE = (
    "Errore: La data di inizio deve cadere all'interno dei periodi di permanenza."
)
NOT_WITHIN_STAY_MESSAGE = (
    "Errore: Il periodo definito deve cadere all'interno dei periodi di permanenza."
)

EXTRA_SECTIONS: tuple[Section, ...] = (Section.ENTRATE, Section.CABINA_PRIVATA)


@dataclass(frozen=True)
class ValidationResult:
    """Annotated copy of the rows plus every error found."""

    rows: RowSet
    issues: list[RowIssue]

    @property
    def has_errors(self) -> bool:
        return bool(self.issues)


def is_within_any_stay(start: date, end: date, stays: list[RowData]) -> bool:
    """True if one single stay covers the whole ``[start, end]`` range."""
    for stay in stays:
        if stay.from_ is None or stay.to is None:
            continue
        if stay.from_ <= start and end <= stay.to:
            return True
    return False


def check_extra_row(row: RowData, window: MinMaxWindow) -> RowError | None:
    """Return the error for one extra row, or None if it is acceptable.

    Rows without a start date are not checked yet. With no stays declared,
    the start-date bound cannot fail, but a full range still has no stay to
    fit in.
    """
    if row.from_ is None:
        return None

    if (
        window.from_ is not None
        and window.to is not None
        and not window.from_ <= row.from_ <= window.to
    ):
        return RowError(
            kind=ErrorKind.OUT_OF_STAY_RANGE,
            field=ErrorField.FROM,
            message=OUT_OF_RANGE_MESSAGE,
        )

    if row.to is not None and not is_within_any_stay(
        row.from_, row.to, window.sorted_rows
    ):
        return RowError(
            kind=ErrorKind.NOT_WITHIN_ANY_STAY,
            field=ErrorField.BOTH,
            message=NOT_WITHIN_STAY_MESSAGE,
        )

    return None


def validate_rows(rows: RowSet, window: MinMaxWindow) -> ValidationResult:
    """Check every entrance and booth row against the stay window.

    The input is left untouched; the returned ``rows`` carry a freshly
    computed ``error`` on every extra row (None clears a stale one). Stay
    rows are passed through as they are.
    """
    issues: list[RowIssue] = []
    annotated_rows = rows

    for section in EXTRA_SECTIONS:
        annotated: list[RowData] = []
        for row in rows.section(section):
            error = check_extra_row(row, window)
            if error is not None:
                issues.append(RowIssue(section=section, row_id=row.id, error=error))
            if row.error != error:
                row = row.model_copy(update={"error": error})
            annotated.append(row)
        annotated_rows = annotated_rows.with_section(section, annotated)

    return ValidationResult(rows=annotated_rows, issues=issues)


def has_validation_errors(rows: RowSet, window: MinMaxWindow) -> bool:
    return validate_rows(rows, window).has_errors
