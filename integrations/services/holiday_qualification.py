"""
Statutory-holiday qualification.

A user qualifies for a holiday by working on at least QUALIFYING_DAYS_REQUIRED
distinct days inside the holiday's qualifying window. The result is evaluated
on read and never stored.
"""

from datetime import date, timedelta
from typing import Iterable, NamedTuple, Optional, Tuple

QUALIFYING_DAYS_REQUIRED = 15
DEFAULT_WINDOW = timedelta(days=28)


class QualificationResult(NamedTuple):
    qualifying_start: date
    qualifying_end: date
    days_worked: int
    days_required: int
    is_qualified: bool


def qualifying_window(
    holiday_date: date,
    qualifying_start: Optional[date] = None,
    qualifying_end: Optional[date] = None,
) -> Tuple[date, date]:
    """Inclusive window, defaulting to [holiday - 28 days, holiday]"""
    start = qualifying_start or holiday_date - DEFAULT_WINDOW
    end = qualifying_end or holiday_date
    return start, end


def evaluate_holiday_qualification(
    holiday_date: date,
    worked_dates: Iterable[date],
    qualifying_start: Optional[date] = None,
    qualifying_end: Optional[date] = None,
) -> QualificationResult:
    """
    Count worked days inside the qualifying window.

    Args:
        holiday_date: Date of the holiday
        worked_dates: Dates of the user's worked shifts (duplicates count once)
        qualifying_start: Explicit window start, if the holiday defines one
        qualifying_end: Explicit window end, if the holiday defines one

    Returns:
        QualificationResult
    """
    start, end = qualifying_window(holiday_date, qualifying_start, qualifying_end)
    days_worked = len({d for d in worked_dates if start <= d <= end})
    return QualificationResult(
        qualifying_start=start,
        qualifying_end=end,
        days_worked=days_worked,
        days_required=QUALIFYING_DAYS_REQUIRED,
        is_qualified=days_worked >= QUALIFYING_DAYS_REQUIRED,
    )


def qualification_for_user(holiday, user) -> QualificationResult:
    """Evaluate a Holiday row against the user's stored worked shifts"""
    from shifts.models import ShiftEntry

    start, end = qualifying_window(
        holiday.date, holiday.qualifying_start, holiday.qualifying_end
    )
    worked_dates = ShiftEntry.objects.for_owner(user).worked_dates(start=start, end=end)
    return evaluate_holiday_qualification(holiday.date, worked_dates, start, end)
