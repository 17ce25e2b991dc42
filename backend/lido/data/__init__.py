"""Rate schedule storage for the lido pricing engine."""

from lido.data.settings_store import (
    dumps_settings,
    load_settings,
    loads_settings,
    save_settings,
    settings_filename,
)

__all__ = [
    "dumps_settings",
    "load_settings",
    "loads_settings",
    "save_settings",
    "settings_filename",
]
