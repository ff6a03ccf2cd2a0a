"""
Consecutive-day streaks of worked shifts.
"""

from datetime import date, datetime, timedelta
from typing import Iterable, List, NamedTuple, Optional

from django.utils import timezone


class StreakResult(NamedTuple):
    current_streak: int
    longest_streak: int
    is_streak_active: bool


def _as_day(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def _runs(days_desc: List[date]) -> List[int]:
    """Lengths of consecutive-day runs, most recent run first"""
    runs = []
    length = 1
    for previous, current in zip(days_desc, days_desc[1:]):
        if previous - current == timedelta(days=1):
            length += 1
        else:
            runs.append(length)
            length = 1
    runs.append(length)
    return runs


def compute_streak(worked_dates: Iterable, today: Optional[date] = None) -> StreakResult:
    """
    Streak state for a set of worked dates.

    The streak is active when the most recent worked day is today or
    yesterday; the current streak is then the length of that most recent run.
    The longest streak counts every run, active or not.
    """
    today = _as_day(today) if today is not None else timezone.localdate()
    days = sorted({_as_day(d) for d in worked_dates}, reverse=True)
    if not days:
        return StreakResult(current_streak=0, longest_streak=0, is_streak_active=False)

    runs = _runs(days)
    is_active = days[0] in (today, today - timedelta(days=1))
    return StreakResult(
        current_streak=runs[0] if is_active else 0,
        longest_streak=max(runs),
        is_streak_active=is_active,
    )
