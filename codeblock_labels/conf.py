# codeblock_labels/conf.py
"""
Label settings: defaults, persistence and the cached process-wide copy.

Settings are stored as a single JSON object under PLUGIN_KEY:

    {"ignoreLanguages": "dataview\\ndataviewjs\\ntasks", "showLanguageAsLabel": true}

Persisted keys missing from the stored object fall back to the defaults.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from django.core.cache import cache

logger = logging.getLogger(__name__)

PLUGIN_KEY = "codeblock-labels"
CACHE_KEY = "codeblock_labels:settings"

DEFAULT_SETTINGS = {
    "ignoreLanguages": "dataview\ndataviewjs\ntasks",
    "showLanguageAsLabel": True,
}


def parse_ignore_languages(value: Optional[str]) -> List[str]:
    """
    Split the newline-delimited ignore setting into language tokens.

    Only the text as a whole is stripped; entries are compared verbatim.
    """
    if not value:
        return []
    value = value.strip()
    if not value:
        return []
    return value.split("\n")


@dataclass(frozen=True)
class LabelSettings:
    ignore_languages: Optional[str] = DEFAULT_SETTINGS["ignoreLanguages"]
    show_language_as_label: bool = DEFAULT_SETTINGS["showLanguageAsLabel"]

    @property
    def ignored_languages(self) -> List[str]:
        return parse_ignore_languages(self.ignore_languages)

    @classmethod
    def from_data(cls, data: Optional[dict]) -> "LabelSettings":
        """Merge a persisted object over the defaults."""
        merged = {**DEFAULT_SETTINGS, **(data or {})}
        return cls(
            ignore_languages=merged["ignoreLanguages"],
            show_language_as_label=bool(merged["showLanguageAsLabel"]),
        )

    def to_data(self) -> dict:
        return {
            "ignoreLanguages": self.ignore_languages,
            "showLanguageAsLabel": self.show_language_as_label,
        }


def load_label_settings() -> LabelSettings:
    """Read settings from storage, bypassing the cache."""
    # Lazy import to keep this module importable before apps are ready
    from codeblock_labels.models import PluginData

    return LabelSettings.from_data(PluginData.objects.load_data(PLUGIN_KEY))


def get_label_settings() -> LabelSettings:
    """Return the cached settings, loading them from storage on first use."""
    settings = cache.get(CACHE_KEY)
    if settings is None:
        settings = load_label_settings()
        cache.set(CACHE_KEY, settings, None)
    return settings


def save_label_settings(settings: LabelSettings) -> LabelSettings:
    """Persist the full settings object and refresh the cached copy."""
    from codeblock_labels.models import PluginData

    PluginData.objects.save_data(PLUGIN_KEY, settings.to_data())
    cache.set(CACHE_KEY, settings, None)
    logger.info(
        "Saved codeblock label settings (show_language_as_label=%s, ignored=%s)",
        settings.show_language_as_label,
        settings.ignored_languages,
    )
    return settings
