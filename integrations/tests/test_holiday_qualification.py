"""
Tests for the holiday qualification evaluator (no database)
"""

from datetime import date, timedelta

from django.test import SimpleTestCase

from integrations.services.holiday_qualification import (
    QUALIFYING_DAYS_REQUIRED,
    evaluate_holiday_qualification,
    qualifying_window,
)

CANADA_DAY = date(2025, 7, 1)


def consecutive_days(end, count):
    return [end - timedelta(days=n) for n in range(count)]


class QualifyingWindowTest(SimpleTestCase):
    def test_default_window_is_28_days_up_to_holiday(self):
        self.assertEqual(
            qualifying_window(CANADA_DAY), (date(2025, 6, 3), CANADA_DAY)
        )

    def test_explicit_bounds_win(self):
        start, end = date(2025, 5, 1), date(2025, 6, 15)
        self.assertEqual(qualifying_window(CANADA_DAY, start, end), (start, end))

    def test_partial_override(self):
        self.assertEqual(
            qualifying_window(CANADA_DAY, qualifying_end=date(2025, 6, 30)),
            (date(2025, 6, 3), date(2025, 6, 30)),
        )


class EvaluateQualificationTest(SimpleTestCase):
    def test_fifteen_days_qualifies(self):
        result = evaluate_holiday_qualification(CANADA_DAY, consecutive_days(CANADA_DAY, 15))
        self.assertEqual(result.days_worked, 15)
        self.assertEqual(result.days_required, QUALIFYING_DAYS_REQUIRED)
        self.assertTrue(result.is_qualified)

    def test_fourteen_days_does_not_qualify(self):
        result = evaluate_holiday_qualification(CANADA_DAY, consecutive_days(CANADA_DAY, 14))
        self.assertEqual(result.days_worked, 14)
        self.assertFalse(result.is_qualified)

    def test_days_outside_window_are_ignored(self):
        inside = consecutive_days(CANADA_DAY, 10)
        outside = [date(2025, 5, 1), date(2025, 7, 2), date(2025, 6, 2)]
        result = evaluate_holiday_qualification(CANADA_DAY, inside + outside)
        self.assertEqual(result.days_worked, 10)

    def test_window_bounds_are_inclusive(self):
        result = evaluate_holiday_qualification(
            CANADA_DAY, [date(2025, 6, 3), CANADA_DAY]
        )
        self.assertEqual(result.days_worked, 2)

    def test_duplicate_dates_count_once(self):
        worked = consecutive_days(CANADA_DAY, 14) * 2
        result = evaluate_holiday_qualification(CANADA_DAY, worked)
        self.assertEqual(result.days_worked, 14)
        self.assertFalse(result.is_qualified)

    def test_evaluation_is_repeatable(self):
        worked = consecutive_days(CANADA_DAY, 15)
        first = evaluate_holiday_qualification(CANADA_DAY, worked)
        second = evaluate_holiday_qualification(CANADA_DAY, worked)
        self.assertEqual(first, second)

    def test_explicit_window(self):
        worked = consecutive_days(date(2025, 6, 15), 20)
        result = evaluate_holiday_qualification(
            CANADA_DAY, worked, date(2025, 6, 1), date(2025, 6, 15)
        )
        self.assertEqual(result.days_worked, 15)
        self.assertTrue(result.is_qualified)
