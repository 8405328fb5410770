"""Override repository.

Layers the user's personal override entries on top of the published
baseline and persists the personal part through a ``KeyValueStore``.
"""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional

from workdaycalc.domain.baseline import BASELINE_OVERRIDES
from workdaycalc.domain.errors import StorageError
from workdaycalc.domain.models import OverrideEntry
from workdaycalc.storage.stores import KeyValueStore

logger = logging.getLogger(__name__)

PERSONAL_OVERRIDES_KEY = "workday-custom-days-v2"
APP_SETTINGS_KEY = "workday-app-settings"
LAST_SYNC_KEY = "workday-last-sync"


def merge_overrides(
    baseline: Iterable[OverrideEntry],
    personal: Iterable[OverrideEntry],
) -> list[OverrideEntry]:
    """Merge personal entries over the baseline.

    A personal entry replaces the baseline entry with the same date;
    personal-only dates are added. The result is sorted by date and holds
    at most one entry per date.
    """
    merged: dict[date, OverrideEntry] = {e.date: e for e in baseline}
    for entry in personal:
        merged[entry.date] = entry
    return [merged[d] for d in sorted(merged)]


def add_or_replace(
    entries: Iterable[OverrideEntry], entry: OverrideEntry
) -> list[OverrideEntry]:
    """Return a new list with ``entry`` replacing any entry on the same date."""
    result = list(entries)
    for i, existing in enumerate(result):
        if existing.date == entry.date:
            result[i] = entry
            return result
    result.append(entry)
    return result


def remove(entries: Iterable[OverrideEntry], day: date) -> list[OverrideEntry]:
    """Return a new list without the entries on ``day``."""
    return [e for e in entries if e.date != day]


@dataclass
class StorageInfo:
    """Snapshot of what the repository holds in its store."""

    personal_count: int
    bytes_used: int
    last_sync: Optional[datetime]


class OverrideRepository:
    """Loads, merges and saves override entries.

    Reads degrade to an empty personal set when the store is unavailable or
    holds unparseable data; writes raise ``StorageError`` so the caller can
    report the failure. A load-modify-save cycle is not atomic.

    Example:
        >>> repo = OverrideRepository(InMemoryStore())
        >>> repo.save_personal(add_or_replace(repo.load_personal(), entry))
        >>> merged = repo.load_merged()
    """

    def __init__(
        self,
        store: KeyValueStore,
        baseline: Iterable[OverrideEntry] = BASELINE_OVERRIDES,
    ):
        self.store = store
        self.baseline = tuple(baseline)

    def load_personal(self) -> list[OverrideEntry]:
        """Load the persisted personal entries.

        Returns:
            The entries sorted by date, or an empty list if nothing is
            stored or the stored value cannot be parsed.
        """
        try:
            raw = self.store.get(PERSONAL_OVERRIDES_KEY)
        except StorageError as e:
            logger.warning("Personal overrides unavailable, using none: %s", e)
            return []

        if not raw:
            return []

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError("expected a JSON array")
            entries = [OverrideEntry.from_dict(item) for item in data]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Discarding unreadable personal overrides: %s", e)
            return []

        return sorted(entries, key=lambda e: e.date)

    def save_personal(self, entries: Iterable[OverrideEntry]) -> None:
        """Overwrite the persisted personal entries.

        Raises:
            StorageError: If the store cannot be written.
        """
        entries = list(entries)
        payload = json.dumps([e.to_dict() for e in entries], ensure_ascii=False)
        self.store.set(PERSONAL_OVERRIDES_KEY, payload)
        self.store.set(LAST_SYNC_KEY, datetime.now(timezone.utc).isoformat())
        logger.info("Saved %d personal overrides", len(entries))

    def load_merged(self) -> list[OverrideEntry]:
        """Baseline merged with the persisted personal entries."""
        return merge_overrides(self.baseline, self.load_personal())

    def add(self, entry: OverrideEntry) -> list[OverrideEntry]:
        """Add or replace a personal entry and persist the result."""
        entries = add_or_replace(self.load_personal(), entry)
        self.save_personal(entries)
        return entries

    def delete(self, day: date) -> list[OverrideEntry]:
        """Remove the personal entry on ``day`` and persist the result."""
        entries = remove(self.load_personal(), day)
        self.save_personal(entries)
        return entries

    def last_sync(self) -> Optional[datetime]:
        try:
            raw = self.store.get(LAST_SYNC_KEY)
            return datetime.fromisoformat(raw) if raw else None
        except (StorageError, ValueError) as e:
            logger.warning("Cannot read last sync time: %s", e)
            return None

    def storage_info(self) -> StorageInfo:
        used = 0
        for key in (PERSONAL_OVERRIDES_KEY, APP_SETTINGS_KEY):
            try:
                used += len((self.store.get(key) or "").encode("utf-8"))
            except StorageError as e:
                logger.warning("Cannot measure %s: %s", key, e)

        return StorageInfo(
            personal_count=len(self.load_personal()),
            bytes_used=used,
            last_sync=self.last_sync(),
        )

    def clear(self) -> None:
        """Remove every key this application writes.

        Raises:
            StorageError: If the store cannot be written.
        """
        for key in (PERSONAL_OVERRIDES_KEY, APP_SETTINGS_KEY, LAST_SYNC_KEY):
            self.store.delete(key)
        logger.info("Cleared stored overrides and settings")
