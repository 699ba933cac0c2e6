"""
Key-value storage for plugin data.

Each plugin stores one JSON object under its own key. The object is read
and written whole, mirroring a load/save data API.
"""

from typing import Optional

from django.db import models

from .base import TimeStampedModel


class PluginDataManager(models.Manager):
    """Manager exposing whole-object load/save by key."""

    def load_data(self, key: str) -> Optional[dict]:
        """Return the object stored under ``key`` or None if nothing was saved."""
        row = self.filter(key=key).only("data").first()
        if row is None:
            return None
        return row.data

    def save_data(self, key: str, data: dict) -> "PluginData":
        """Replace the object stored under ``key``."""
        row, _ = self.update_or_create(key=key, defaults={"data": data})
        return row


class PluginData(TimeStampedModel):
    key = models.CharField(max_length=100, unique=True)
    data = models.JSONField(default=dict, blank=True)

    objects = PluginDataManager()

    class Meta:
        verbose_name = "plugin data"
        verbose_name_plural = "plugin data"
        ordering = ["key"]

    def __str__(self):
        return self.key
