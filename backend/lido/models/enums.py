"""Enums for the lido domain models.

Section names are the Italian labels shown to the cashier and double as
breakdown keys, so their values must not change.
"""

from enum import StrEnum


class Section(StrEnum):
    """Row groups entered for a guest."""

    PERMANENZA = "Permanenza"
    ENTRATE = "Entrate"
    CABINA_PRIVATA = "Cabina privata"


class ErrorField(StrEnum):
    """Which input of a row a validation error points at."""

    FROM = "from"
    TO = "to"
    BOTH = "both"
    EXTRA_ENTRANCES = "extraEntrances"


class ErrorKind(StrEnum):
    """Validation failures for extra (entrance/booth) rows."""

    OUT_OF_STAY_RANGE = "out_of_stay_range"
    NOT_WITHIN_ANY_STAY = "not_within_any_stay"


class RowState(StrEnum):
    """Lifecycle of a single row as the cashier fills it in."""

    EMPTY = "empty"
    PARTIAL = "partial"
    COMPLETE_VALID = "complete_valid"
    COMPLETE_INVALID = "complete_invalid"


DISCOUNT_KEY = "Sconto"

RESERVED_KEYS: frozenset[str] = frozenset(
    {Section.ENTRATE.value, Section.CABINA_PRIVATA.value, DISCOUNT_KEY}
)
