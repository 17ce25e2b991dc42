"""Import and export of the rate schedule as a JSON document.

The document is a single object with exactly the Settings fields, in the
camelCase spelling the calculator saves:

    {"periods": [...], "priceEntrance": 5, "priceBooth": 5,
     "closingDate": "2021-08-31", "priceDiscount": 5, "daysNoDiscount": 15}
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from lido.exceptions import SettingsFileError
from lido.models.settings import Settings

logger = logging.getLogger(__name__)

FILENAME_PREFIX = "impostazioni"


def settings_filename(today: date | None = None) -> str:
    """Default export name, e.g. 'impostazioni-2021-08-01.json'."""
    day = today or date.today()
    return f"{FILENAME_PREFIX}-{day.isoformat()}.json"


def loads_settings(text: str | bytes) -> Settings:
    """Parse a JSON document into Settings.

    Raises:
        SettingsFileError: If the text is not JSON or does not have the
            Settings shape.
    """
    try:
        return Settings.model_validate_json(text)
    except ValidationError as exc:
        msg = f"Invalid settings document: {exc.error_count()} problem(s)"
        raise SettingsFileError(msg) from exc


def dumps_settings(settings: Settings) -> str:
    return settings.model_dump_json(by_alias=True)


def load_settings(path: str | Path) -> Settings:
    """Read Settings from a JSON file.

    Raises:
        SettingsFileError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read settings file {path}"
        raise SettingsFileError(msg) from exc

    settings = loads_settings(text)
    logger.info("Loaded settings from %s (%d period(s))", path, len(settings.periods))
    return settings


def save_settings(
    settings: Settings,
    directory: str | Path,
    today: date | None = None,
) -> Path:
    """Write Settings into ``directory`` under the dated default name.

    Returns the path written.

    Raises:
        SettingsFileError: If the file cannot be written.
    """
    path = Path(directory) / settings_filename(today)
    try:
        path.write_text(dumps_settings(settings), encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot write settings file {path}"
        raise SettingsFileError(msg) from exc

    logger.info("Saved settings to %s", path)
    return path
