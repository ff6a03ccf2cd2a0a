from datetime import date, datetime, timedelta

from django.test import SimpleTestCase

from gamification.streaks import StreakResult, compute_streak

TODAY = date(2025, 3, 20)


def days_ago(*offsets):
    return [TODAY - timedelta(days=n) for n in offsets]


class ComputeStreakTest(SimpleTestCase):
    def test_no_dates(self):
        self.assertEqual(compute_streak([], TODAY), StreakResult(0, 0, False))

    def test_three_day_run_ending_today(self):
        self.assertEqual(compute_streak(days_ago(0, 1, 2), TODAY), StreakResult(3, 3, True))

    def test_run_ending_yesterday_is_active(self):
        self.assertEqual(compute_streak(days_ago(1, 2), TODAY), StreakResult(2, 2, True))

    def test_old_single_day_is_inactive(self):
        self.assertEqual(compute_streak(days_ago(3), TODAY), StreakResult(0, 1, False))

    def test_longest_streak_found_in_older_run(self):
        result = compute_streak(days_ago(0, 1, 5, 6, 7, 8), TODAY)
        self.assertEqual(result, StreakResult(2, 4, True))

    def test_inactive_keeps_longest(self):
        result = compute_streak(days_ago(4, 5, 6, 10), TODAY)
        self.assertEqual(result, StreakResult(0, 3, False))

    def test_duplicates_and_datetimes_are_normalized(self):
        worked = [
            datetime(2025, 3, 20, 7, 0),
            datetime(2025, 3, 20, 19, 30),
            date(2025, 3, 19),
            date(2025, 3, 19),
        ]
        self.assertEqual(compute_streak(worked, TODAY), StreakResult(2, 2, True))

    def test_unsorted_input(self):
        self.assertEqual(compute_streak(days_ago(2, 0, 1), TODAY), StreakResult(3, 3, True))
