"""Factory functions for creating pre-configured PricingEngine instances."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from lido.data.settings_store import load_settings
from lido.engine import PricingEngine
from lido.models.settings import Settings, default_settings

logger = logging.getLogger(__name__)

SETTINGS_PATH_ENV = "LIDO_SETTINGS_PATH"

# .env lookup: project root (backend/../.env), then backend/.env
_backend_dir = Path(__file__).resolve().parent.parent
_project_root = _backend_dir.parent


def load_environment() -> None:
    """Load .env files into the process environment (existing vars win)."""
    load_dotenv(_project_root / ".env")
    load_dotenv(_backend_dir / ".env")


def create_default_engine(settings: Settings | None = None) -> PricingEngine:
    """Create a PricingEngine for typical usage.

    When ``settings`` is not given, the schedule saved at
    ``$LIDO_SETTINGS_PATH`` is loaded; without that variable the engine
    starts from the default (still unconfigured) schedule.

    Raises:
        SettingsFileError: If ``LIDO_SETTINGS_PATH`` points to an unreadable
            or malformed file.

    Example::

        from lido import create_default_engine, find_min_max_dates

        engine = create_default_engine()
        quote = engine.calculate_total(rows, find_min_max_dates(rows.permanenza))
    """
    if settings is None:
        load_environment()
        path = os.environ.get(SETTINGS_PATH_ENV, "")
        if path:
            settings = load_settings(path)
        else:
            logger.info("%s not set; using default settings", SETTINGS_PATH_ENV)
            settings = default_settings()
    return PricingEngine(settings)
