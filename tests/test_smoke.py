"""Smoke tests for the end-to-end calculator and CLI flows."""

import json
from datetime import date

import pytest

from workdaycalc.cli import main
from workdaycalc.domain.models import DayKind, DurationUnit, OverrideEntry
from workdaycalc.engine.calculator import WorkdayCalculator
from workdaycalc.storage.repository import OverrideRepository
from workdaycalc.storage.stores import InMemoryStore


class TestCalculatorSmoke:
    """End-to-end flows through the calculator facade."""

    def test_personal_override_changes_counts(self):
        repository = OverrideRepository(InMemoryStore())
        before = WorkdayCalculator(repository.load_merged()).count_workdays(
            date(2025, 3, 10), date(2025, 3, 16)
        )

        repository.add(OverrideEntry(date(2025, 3, 14), DayKind.HOLIDAY, "Company day"))
        calculator = WorkdayCalculator(repository.load_merged())

        assert before == 5
        assert calculator.count_workdays(date(2025, 3, 10), date(2025, 3, 16)) == 4
        assert not calculator.is_workday(date(2025, 3, 14))

    def test_duration_matches_range(self):
        calculator = WorkdayCalculator()
        end, result = calculator.calculate_duration(date(2025, 1, 1), 10, DurationUnit.WORKDAY)
        assert result.workday_count == 10
        assert calculator.is_workday(end)


class TestCli:
    """Smoke tests for the command-line interface."""

    @pytest.fixture
    def store_args(self, tmp_path):
        return ["--store", str(tmp_path / "store.json")]

    def test_range(self, store_args, capsys):
        assert main(store_args + ["range", "2025-01-01", "2025-01-31"]) == 0
        out = capsys.readouterr().out
        assert "Workdays: 17 (overridden: 0)" in out

    def test_reversed_range_is_invalid(self, store_args, capsys):
        assert main(store_args + ["range", "2025-01-31", "2025-01-01"]) == 2
        assert "start_after_end" in capsys.readouterr().err

    def test_duration(self, store_args, capsys):
        assert main(store_args + ["duration", "2025-01-01", "5"]) == 0
        assert "End date: 2025-01-08" in capsys.readouterr().out

    def test_duration_invalid_count(self, store_args, capsys):
        assert main(store_args + ["duration", "2025-01-01", "zero"]) == 2
        assert "invalid_day_count" in capsys.readouterr().err

    def test_hours(self, store_args, capsys):
        args = ["hours", "2025-01-06", "2025-01-08", "--from", "14:00", "--to", "10:00"]
        assert main(store_args + args) == 0
        assert "13h" in capsys.readouterr().out

    def test_overrides_add_list_remove(self, store_args, tmp_path, capsys):
        assert main(store_args + ["overrides", "add", "2025-03-14", "holiday", "Company day"]) == 0
        assert main(store_args + ["overrides", "list", "--personal"]) == 0
        out = capsys.readouterr().out
        assert "2025-03-14 Fri holiday  Company day" in out
        assert "1 entries" in out

        stored = json.loads((tmp_path / "store.json").read_text(encoding="utf-8"))
        assert "workday-custom-days-v2" in stored

        assert main(store_args + ["range", "2025-03-10", "2025-03-16"]) == 0
        assert "Workdays: 4" in capsys.readouterr().out

        assert main(store_args + ["overrides", "remove", "2025-03-14"]) == 0
        assert "0 personal entries" in capsys.readouterr().out

    def test_overrides_add_requires_label(self, store_args, capsys):
        assert main(store_args + ["overrides", "add", "2025-03-14", "holiday", "  "]) == 2
        assert "missing_label" in capsys.readouterr().err

    def test_promote(self, store_args, tmp_path, capsys):
        main(store_args + ["overrides", "add", "2025-03-14", "holiday", "Company day"])
        output = tmp_path / "baseline.json"
        assert main(store_args + ["overrides", "promote", "--output", str(output)]) == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert "2025-03-14" in [item["date"] for item in data]

    def test_settings_change_work_hours(self, store_args, capsys):
        assert main(store_args + ["settings", "set", "--morning", "09:00-12:00"]) == 0
        assert "09:00-12:00" in capsys.readouterr().out

        args = ["hours", "2025-01-06", "2025-01-06", "--from", "08:00", "--to", "18:00"]
        assert main(store_args + args) == 0
        assert "7h" in capsys.readouterr().out

    def test_no_command(self, store_args, capsys):
        assert main(store_args) == 1
