"""Command-line interface for the workday calculator."""

import argparse
import json
import logging
import os
import sys
from datetime import date
from pathlib import Path
from typing import Optional

from workdaycalc.domain.baseline import promote_to_baseline
from workdaycalc.domain.errors import InvalidInputError, StorageError, WorkdaySearchExhausted
from workdaycalc.domain.models import (
    CalculationMode,
    CalculationResult,
    DayKind,
    DurationUnit,
    OverrideEntry,
    parse_clock,
    parse_date,
)
from workdaycalc.engine.calculator import WorkdayCalculator
from workdaycalc.engine.range_calculator import SequenceSelector
from workdaycalc.output.pdf_generator import PDFGenerator
from workdaycalc.output.summary_generator import SummaryGenerator, format_work_time
from workdaycalc.storage.repository import OverrideRepository
from workdaycalc.storage.settings import SettingsStore
from workdaycalc.storage.stores import JsonFileStore
from workdaycalc.validation.validator import InputValidator

logger = logging.getLogger(__name__)

DEFAULT_STORE = "~/.workdaycalc.json"


def _iso_date(value: str) -> date:
    try:
        return parse_date(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD")


def _period(value: str) -> dict[str, str]:
    try:
        start, end = value.split("-")
        return {"start": start.strip(), "end": end.strip()}
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid period {value!r}, expected HH:MM-HH:MM")


def build_calculator(store: JsonFileStore) -> WorkdayCalculator:
    """Create a calculator from the stored overrides and settings."""
    repository = OverrideRepository(store)
    settings = SettingsStore(store).load()
    return WorkdayCalculator(
        repository.load_merged(),
        schedule_policy=settings.schedule_policy(),
    )


def export_result(
    args: argparse.Namespace,
    calculator: WorkdayCalculator,
    result: CalculationResult,
    start: date,
    end: date,
    selector: SequenceSelector,
) -> None:
    """Write text and PDF exports requested on the command line."""
    if args.text:
        SummaryGenerator().generate(result, start, end, args.text)
        print(f"  Summary written to {args.text}")
    if args.pdf:
        PDFGenerator().generate(calculator, result, start, end, args.pdf, selector=selector)
        print(f"  PDF written to {args.pdf}")


def print_result(result: CalculationResult, start: date, end: date) -> None:
    print(f"\nRange: {start} ({start.strftime('%a')}) to {end} ({end.strftime('%a')})")
    print(f"  Calendar days: {result.total_calendar_days}")
    print(f"  Workdays: {result.workday_count} "
          f"(overridden: {result.overridden_workday_count})")
    print(f"  Holidays: {result.holiday_count} "
          f"(weekend: {result.weekend_holiday_count}, "
          f"overridden: {result.overridden_holiday_count})")

    if result.has_work_hours:
        print(f"  Work time: {format_work_time(result.work_hours, result.work_minutes)}")

    for entry in result.overridden_holiday_entries + result.overridden_workday_entries:
        print(f"    {entry.date} {entry.kind.value:<8} {entry.label}")


def run_range(args: argparse.Namespace, store: JsonFileStore) -> int:
    InputValidator().validate_range(args.start, args.end).raise_if_invalid()

    calculator = build_calculator(store)
    result = calculator.calculate_range(args.start, args.end)
    print_result(result, args.start, args.end)
    export_result(args, calculator, result, args.start, args.end, SequenceSelector.WORKDAYS)
    return 0


def run_duration(args: argparse.Namespace, store: JsonFileStore) -> int:
    InputValidator().validate_duration(args.start, args.days).raise_if_invalid()

    unit = DurationUnit(args.unit)
    calculator = build_calculator(store)
    end, result = calculator.calculate_duration(
        args.start, int(args.days), unit, include_start_date=not args.exclude_start
    )

    print(f"End date: {end}")
    print_result(result, args.start, end)
    selector = SequenceSelector.WORKDAYS if unit == DurationUnit.WORKDAY else SequenceSelector.ALL
    export_result(args, calculator, result, args.start, end, selector)
    return 0


def run_hours(args: argparse.Namespace, store: JsonFileStore) -> int:
    InputValidator().validate_work_hours(
        args.start, args.end, args.start_time, args.end_time
    ).raise_if_invalid()

    calculator = build_calculator(store)
    result = calculator.calculate_range_work_hours(
        args.start, args.end, parse_clock(args.start_time), parse_clock(args.end_time)
    )
    print(SummaryGenerator().generate_to_string(result, args.start, args.end))
    export_result(args, calculator, result, args.start, args.end, SequenceSelector.WORK_HOURS)
    return 0


def run_overrides(args: argparse.Namespace, store: JsonFileStore) -> int:
    repository = OverrideRepository(store)

    if args.action == "list":
        entries = repository.load_personal() if args.personal else repository.load_merged()
        for entry in entries:
            print(f"{entry.date} {entry.date.strftime('%a')} {entry.kind.value:<8} {entry.label}")
        print(f"\n{len(entries)} entries")
    elif args.action == "add":
        InputValidator().validate_custom_day(args.date, args.label).raise_if_invalid()
        entry = OverrideEntry(date=args.date, kind=DayKind(args.kind), label=args.label.strip())
        entries = repository.add(entry)
        print(f"Saved {entry.date} as {entry.kind.value}; {len(entries)} personal entries")
    elif args.action == "remove":
        entries = repository.delete(args.date)
        print(f"Removed {args.date}; {len(entries)} personal entries")
    elif args.action == "promote":
        merged, new_entries = promote_to_baseline(repository.load_personal(), repository.baseline)
        if not new_entries:
            print("All personal entries already exist in the baseline")
            return 0
        payload = json.dumps([e.to_dict() for e in merged], ensure_ascii=False, indent=2)
        Path(args.output).write_text(payload, encoding="utf-8")
        print(f"Wrote {len(merged)} baseline entries ({len(new_entries)} new) to {args.output}")
    elif args.action == "info":
        info = repository.storage_info()
        print(f"Personal entries: {info.personal_count}")
        print(f"Storage used: {info.bytes_used / 1024:.2f} KB")
        print(f"Last sync: {info.last_sync.isoformat() if info.last_sync else 'never'}")
    elif args.action == "clear":
        repository.clear()
        print("Cleared stored overrides and settings")
    return 0


def run_settings(args: argparse.Namespace, store: JsonFileStore) -> int:
    settings_store = SettingsStore(store)

    if args.action == "set":
        changes = {}
        if args.mode:
            changes["preferred_mode"] = CalculationMode(args.mode)
        if args.morning or args.afternoon:
            hours = dict(settings_store.load().default_work_hours)
            if args.morning:
                hours["morning"] = args.morning
            if args.afternoon:
                hours["afternoon"] = args.afternoon
            changes["default_work_hours"] = hours
        settings = settings_store.save(**changes)
    else:
        settings = settings_store.load()

    policy = settings.schedule_policy()
    print(f"Preferred mode: {settings.preferred_mode.value}")
    print(f"Work periods: {', '.join(str(p) for p in policy.work_periods())} "
          f"({format_work_time(*divmod(policy.full_day_minutes(), 60))} per day)")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Workday Calculator - working days, calendar days and work hours",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s range 2025-01-01 2025-01-31            Count days in January
  %(prog)s range 2025-01-01 2025-03-31 --pdf q1.pdf  Print a calendar
  %(prog)s duration 2025-01-01 5                  5th workday from Jan 1
  %(prog)s duration 2025-01-01 30 --unit calendar 30 calendar days
  %(prog)s hours 2025-03-03 2025-03-05 --from 09:00 --to 11:00

  %(prog)s overrides add 2025-03-14 holiday "Company day"
  %(prog)s overrides remove 2025-03-14
  %(prog)s settings set --morning 09:00-12:00
        """,
    )
    parser.add_argument(
        "--store",
        default=os.environ.get("WORKDAYCALC_STORE", DEFAULT_STORE),
        help=f"JSON file holding personal overrides and settings (default: {DEFAULT_STORE})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_exports(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--text", help="Write a text summary to this path")
        sub.add_argument("--pdf", help="Write a printable PDF calendar to this path")

    range_parser = subparsers.add_parser("range", help="Count days between two dates")
    range_parser.add_argument("start", type=_iso_date, help="Start date (YYYY-MM-DD)")
    range_parser.add_argument("end", type=_iso_date, help="End date (YYYY-MM-DD)")
    add_exports(range_parser)

    duration_parser = subparsers.add_parser("duration", help="Find the end date of a duration")
    duration_parser.add_argument("start", type=_iso_date, help="Start date (YYYY-MM-DD)")
    duration_parser.add_argument("days", help="Number of days to count")
    duration_parser.add_argument(
        "--unit", "-u",
        default=DurationUnit.WORKDAY.value,
        choices=[u.value for u in DurationUnit],
        help="Count workdays or calendar days (default: workday)",
    )
    duration_parser.add_argument(
        "--exclude-start",
        action="store_true",
        help="Start counting the day after the start date",
    )
    add_exports(duration_parser)

    hours_parser = subparsers.add_parser("hours", help="Calculate work hours in a range")
    hours_parser.add_argument("start", type=_iso_date, help="Start date (YYYY-MM-DD)")
    hours_parser.add_argument("end", type=_iso_date, help="End date (YYYY-MM-DD)")
    hours_parser.add_argument("--from", dest="start_time", required=True, help="Start time HH:MM")
    hours_parser.add_argument("--to", dest="end_time", required=True, help="End time HH:MM")
    add_exports(hours_parser)

    overrides_parser = subparsers.add_parser("overrides", help="Manage holiday/workday overrides")
    override_actions = overrides_parser.add_subparsers(dest="action", required=True)
    list_parser = override_actions.add_parser("list", help="List merged overrides")
    list_parser.add_argument("--personal", action="store_true", help="Only personal entries")
    add_parser = override_actions.add_parser("add", help="Add or replace a personal entry")
    add_parser.add_argument("date", type=_iso_date)
    add_parser.add_argument("kind", choices=[k.value for k in DayKind])
    add_parser.add_argument("label")
    remove_parser = override_actions.add_parser("remove", help="Remove a personal entry")
    remove_parser.add_argument("date", type=_iso_date)
    promote_parser = override_actions.add_parser(
        "promote", help="Write a baseline candidate including personal entries"
    )
    promote_parser.add_argument("--output", "-o", default="baseline.json")
    override_actions.add_parser("info", help="Show storage usage")
    override_actions.add_parser("clear", help="Remove all stored data")

    settings_parser = subparsers.add_parser("settings", help="Show or change settings")
    settings_actions = settings_parser.add_subparsers(dest="action", required=True)
    settings_actions.add_parser("show", help="Show current settings")
    set_parser = settings_actions.add_parser("set", help="Change settings")
    set_parser.add_argument("--mode", choices=[m.value for m in CalculationMode])
    set_parser.add_argument("--morning", type=_period, help="Morning period HH:MM-HH:MM")
    set_parser.add_argument("--afternoon", type=_period, help="Afternoon period HH:MM-HH:MM")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    commands = {
        "range": run_range,
        "duration": run_duration,
        "hours": run_hours,
        "overrides": run_overrides,
        "settings": run_settings,
    }
    if args.command not in commands:
        parser.print_help()
        return 1

    store = JsonFileStore(args.store)
    try:
        return commands[args.command](args, store)
    except InvalidInputError as e:
        print("Invalid input:", file=sys.stderr)
        for error in e.errors:
            print(f"  - {error}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2
    except WorkdaySearchExhausted as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except StorageError as e:
        logger.error("Storage failure: %s", e)
        print(f"Could not save: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
