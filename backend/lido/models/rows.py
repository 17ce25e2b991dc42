"""Row models: what the cashier types into each section of the calculator."""

from __future__ import annotations

import uuid
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lido.models.enums import ErrorField, ErrorKind, RowState, Section

RowId = int | str


class RowError(BaseModel):
    """A validation error attached to a single row."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    field: ErrorField
    message: str


class RowData(BaseModel):
    """One line of a section.

    Stay rows ("Permanenza") use ``category``; entrance rows ("Entrate") use
    ``extra_entrances``; booth rows ("Cabina privata") only carry dates.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: RowId
    from_: date | None = Field(default=None, alias="from")
    to: date | None = None
    category: str | None = None
    extra_entrances: int | None = Field(default=None, alias="extraEntrances", ge=0)
    error: RowError | None = None

    @field_validator("from_", "to", "category", "extra_entrances", mode="before")
    @classmethod
    def blank_is_missing(cls, v: object) -> object:
        # Cleared form inputs arrive as empty strings.
        if v == "":
            return None
        return v

    @property
    def has_range(self) -> bool:
        return self.from_ is not None and self.to is not None

    @property
    def is_complete_stay(self) -> bool:
        """True when the row can be billed as a stay."""
        return self.has_range and bool(self.category)


class MinMaxWindow(BaseModel):
    """Earliest stay start, latest stay end, and the stays sorted by start."""

    model_config = ConfigDict(populate_by_name=True)

    from_: date | None = Field(default=None, alias="from")
    to: date | None = None
    sorted_rows: list[RowData] = Field(default_factory=list, alias="sorted")

    @property
    def is_empty(self) -> bool:
        return self.from_ is None or self.to is None


class RowSet(BaseModel):
    """All rows entered for a guest, grouped by section."""

    model_config = ConfigDict(populate_by_name=True)

    permanenza: list[RowData] = Field(default_factory=list, alias="Permanenza")
    entrate: list[RowData] = Field(default_factory=list, alias="Entrate")
    cabina_privata: list[RowData] = Field(
        default_factory=list, alias="Cabina privata"
    )

    @classmethod
    def initial(cls) -> RowSet:
        """A fresh form: one empty row in every section."""
        return cls(
            permanenza=[new_row()],
            entrate=[new_row()],
            cabina_privata=[new_row()],
        )

    def section(self, section: Section) -> list[RowData]:
        return getattr(self, _SECTION_ATTRS[section])

    def with_section(self, section: Section, rows: list[RowData]) -> RowSet:
        """Return a copy with one section replaced."""
        return self.model_copy(update={_SECTION_ATTRS[section]: list(rows)})


_SECTION_ATTRS: dict[Section, str] = {
    Section.PERMANENZA: "permanenza",
    Section.ENTRATE: "entrate",
    Section.CABINA_PRIVATA: "cabina_privata",
}


def new_row() -> RowData:
    """Create an empty row with a fresh identifier."""
    return RowData(id=uuid.uuid4().hex)


def row_has_data(row: RowData) -> bool:
    return any(
        value is not None
        for value in (row.from_, row.to, row.category, row.extra_entrances)
    )


def is_row_complete(section: Section, row: RowData) -> bool:
    """Whether a row holds everything its section needs to be billed."""
    if not row.has_range:
        return False
    if section == Section.PERMANENZA:
        return bool(row.category)
    if section == Section.ENTRATE:
        return (row.extra_entrances or 0) > 0
    return True


def row_state(section: Section, row: RowData) -> RowState:
    if not row_has_data(row):
        return RowState.EMPTY
    if not is_row_complete(section, row):
        return RowState.PARTIAL
    if row.error is not None:
        return RowState.COMPLETE_INVALID
    return RowState.COMPLETE_VALID


def can_add_row(section: Section, last_row: RowData) -> bool:
    """A new row may be appended once the last one is complete."""
    return is_row_complete(section, last_row)


class RowIssue(BaseModel):
    """A validation error located by section and row id."""

    model_config = ConfigDict(frozen=True)

    section: Section
    row_id: RowId
    error: RowError
