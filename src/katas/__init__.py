"""Clean code katas: paired anti-pattern / corrected examples."""

from .config import Settings, settings
from .domain import KataCatalog, KataEntry
from .log import configure_from_settings, setup_logging

__all__ = [
    "KataCatalog",
    "KataEntry",
    "Settings",
    "configure_from_settings",
    "settings",
    "setup_logging",
]
