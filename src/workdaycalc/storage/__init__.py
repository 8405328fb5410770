"""Persistence of personal overrides and app settings."""

from workdaycalc.storage.repository import (
    APP_SETTINGS_KEY,
    LAST_SYNC_KEY,
    PERSONAL_OVERRIDES_KEY,
    OverrideRepository,
    StorageInfo,
    add_or_replace,
    merge_overrides,
    remove,
)
from workdaycalc.storage.settings import AppSettings, SettingsStore
from workdaycalc.storage.stores import InMemoryStore, JsonFileStore, KeyValueStore

__all__ = [
    # Stores
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    # Overrides
    "OverrideRepository",
    "StorageInfo",
    "add_or_replace",
    "merge_overrides",
    "remove",
    "APP_SETTINGS_KEY",
    "LAST_SYNC_KEY",
    "PERSONAL_OVERRIDES_KEY",
    # Settings
    "AppSettings",
    "SettingsStore",
]
