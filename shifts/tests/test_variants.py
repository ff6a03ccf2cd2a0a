"""
Tests for entry-type variants and qualifying-days normalization
"""

from datetime import date
from decimal import Decimal

from django.test import SimpleTestCase

from core.exceptions import ShiftValidationError
from shifts.models import ShiftEntry
from shifts.variants import (
    LeaveEntry,
    PlainEntry,
    StatHolidayEntry,
    WorkedEntry,
    clear_foreign_fields,
    normalize_qualifying_days,
    variant_for,
)


def entry(**fields):
    return ShiftEntry(date=date(2025, 3, 10), **fields)


class VariantForTest(SimpleTestCase):
    def test_worked_variant(self):
        variant = variant_for(
            entry(entry_type="worked", job="Labour", location="Centerm", shift_type="day")
        )
        self.assertEqual(variant, WorkedEntry("Labour", "Centerm", "day", ""))

    def test_worked_requires_job_location_shift_type(self):
        with self.assertRaises(ShiftValidationError) as ctx:
            variant_for(entry(entry_type="worked", job="Labour"))
        self.assertEqual(set(ctx.exception.details), {"location", "shift_type"})

    def test_leave_variant(self):
        self.assertEqual(
            variant_for(entry(entry_type="leave", leave_type="sick_leave")),
            LeaveEntry("sick_leave"),
        )

    def test_leave_requires_leave_type(self):
        with self.assertRaises(ShiftValidationError) as ctx:
            variant_for(entry(entry_type="leave"))
        self.assertIn("leave_type", ctx.exception.details)

    def test_leave_rejects_worked_fields(self):
        with self.assertRaises(ShiftValidationError) as ctx:
            variant_for(entry(entry_type="leave", leave_type="sick_leave", job="Labour"))
        self.assertIn("job", ctx.exception.details)

    def test_stat_holiday_variant(self):
        variant = variant_for(
            entry(entry_type="stat_holiday", holiday="Canada Day", qualifying_days=15)
        )
        self.assertEqual(variant, StatHolidayEntry("Canada Day", 15))

    def test_stat_holiday_rejects_unknown_bucket(self):
        with self.assertRaises(ShiftValidationError):
            variant_for(entry(entry_type="stat_holiday", holiday="Canada Day", qualifying_days=7))

    def test_plain_entries_reject_every_variant_field(self):
        for entry_type in ("vacation", "standby", "day_off"):
            with self.subTest(entry_type=entry_type):
                self.assertEqual(variant_for(entry(entry_type=entry_type)), PlainEntry(entry_type))
                with self.assertRaises(ShiftValidationError):
                    variant_for(entry(entry_type=entry_type, holiday="Canada Day"))

    def test_common_fields_allowed_everywhere(self):
        shift = entry(entry_type="vacation", hours=Decimal("8"), total_pay=Decimal("300"), notes="x")
        self.assertEqual(variant_for(shift), PlainEntry("vacation"))

    def test_unknown_entry_type(self):
        with self.assertRaises(ShiftValidationError):
            variant_for(entry(entry_type="overtime"))


class ClearForeignFieldsTest(SimpleTestCase):
    def test_switching_to_leave_clears_worked_fields(self):
        shift = entry(
            entry_type="worked", job="Labour", location="Centerm", shift_type="day",
            overtime_hours=Decimal("2"), meal=True, foreman="Smith",
        )
        clear_foreign_fields(shift, "leave", keep=["leave_type"])
        shift.entry_type = "leave"
        shift.leave_type = "sick_leave"
        self.assertEqual(shift.job, "")
        self.assertEqual(shift.overtime_hours, Decimal("0"))
        self.assertFalse(shift.meal)
        self.assertEqual(variant_for(shift), LeaveEntry("sick_leave"))

    def test_supplied_fields_are_kept(self):
        shift = entry(entry_type="leave", leave_type="sick_leave")
        clear_foreign_fields(shift, "worked", keep=["leave_type"])
        self.assertEqual(shift.leave_type, "sick_leave")


class NormalizeQualifyingDaysTest(SimpleTestCase):
    def test_labels(self):
        self.assertEqual(normalize_qualifying_days("15+"), 15)
        self.assertEqual(normalize_qualifying_days("1-14"), 14)

    def test_numbers(self):
        self.assertEqual(normalize_qualifying_days(15), 15)
        self.assertEqual(normalize_qualifying_days(20), 15)
        self.assertEqual(normalize_qualifying_days(14), 14)
        self.assertEqual(normalize_qualifying_days("3"), 14)

    def test_empty(self):
        self.assertIsNone(normalize_qualifying_days(None))
        self.assertIsNone(normalize_qualifying_days(""))

    def test_invalid(self):
        for value in ("lots", 0, -2, True):
            with self.subTest(value=value):
                with self.assertRaises(ShiftValidationError):
                    normalize_qualifying_days(value)
