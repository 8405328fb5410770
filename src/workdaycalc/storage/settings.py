"""Application settings persistence."""

import json
import logging
from dataclasses import dataclass, field, fields, replace
from datetime import datetime, timezone
from typing import Any, Optional

from workdaycalc.domain.errors import StorageError
from workdaycalc.domain.models import CalculationMode
from workdaycalc.domain.policies import DefaultWorkSchedulePolicy
from workdaycalc.storage.repository import APP_SETTINGS_KEY
from workdaycalc.storage.stores import KeyValueStore

logger = logging.getLogger(__name__)


def _default_work_hours() -> dict[str, dict[str, str]]:
    return {
        "morning": {"start": "08:30", "end": "12:30"},
        "afternoon": {"start": "13:30", "end": "17:30"},
    }


@dataclass
class AppSettings:
    """User preferences.

    Attributes:
        preferred_mode: Calculation the user starts with.
        default_work_hours: Morning/afternoon work periods as "HH:MM" pairs.
        last_updated: When the settings were last saved.
    """

    preferred_mode: CalculationMode = CalculationMode.RANGE
    default_work_hours: dict[str, dict[str, str]] = field(default_factory=_default_work_hours)
    last_updated: Optional[datetime] = None

    def schedule_policy(self) -> DefaultWorkSchedulePolicy:
        """Build the work schedule policy these settings describe."""
        return DefaultWorkSchedulePolicy.from_settings(self.default_work_hours)

    def to_dict(self) -> dict[str, Any]:
        return {
            "preferredCalculationMode": self.preferred_mode.value,
            "defaultWorkHours": self.default_work_hours,
            "lastUpdated": self.last_updated.isoformat() if self.last_updated else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AppSettings":
        """Build settings from stored data; absent keys keep their defaults."""
        settings = cls()
        if "preferredCalculationMode" in data:
            settings.preferred_mode = CalculationMode(data["preferredCalculationMode"])
        if data.get("defaultWorkHours"):
            hours = _default_work_hours()
            for name, period in data["defaultWorkHours"].items():
                hours.setdefault(name, {}).update(period)
            settings.default_work_hours = hours
        if data.get("lastUpdated"):
            settings.last_updated = datetime.fromisoformat(data["lastUpdated"])
        return settings


class SettingsStore:
    """Loads and saves ``AppSettings`` through a key-value store."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def load(self) -> AppSettings:
        """Load settings, falling back to defaults on any read problem."""
        try:
            raw = self.store.get(APP_SETTINGS_KEY)
            if not raw:
                return AppSettings()
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return AppSettings.from_dict(data)
        except (StorageError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Using default settings: %s", e)
            return AppSettings()

    def save(self, **changes: Any) -> AppSettings:
        """Merge ``changes`` into the stored settings and persist them.

        Args:
            **changes: AppSettings field names and their new values.

        Raises:
            TypeError: If a change names an unknown field.
            StorageError: If the store cannot be written.
        """
        known = {f.name for f in fields(AppSettings)}
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")

        changes["last_updated"] = datetime.now(timezone.utc)
        settings = replace(self.load(), **changes)
        # Fail before writing if the work hours are unusable
        settings.schedule_policy()
        self.store.set(APP_SETTINGS_KEY, json.dumps(settings.to_dict()))
        return settings
