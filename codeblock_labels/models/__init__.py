"""
Models for the codeblock_labels app.

- base: Base models and mixins (TimeStampedModel)
- plugin_data: Key-value storage for persisted plugin settings (PluginData)
"""

from .base import TimeStampedModel
from .plugin_data import PluginData, PluginDataManager

__all__ = [
    "TimeStampedModel",
    "PluginData",
    "PluginDataManager",
]
