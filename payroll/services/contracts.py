"""
Data contracts for pay calculations.
"""

from decimal import Decimal
from typing import TypedDict


class PayInput(TypedDict, total=False):
    """Inputs of a single shift's pay. Missing hour fields count as 0."""
    job: str
    hours: Decimal
    overtime_hours: Decimal
    travel_hours: Decimal
    include_meal: bool


class PayBreakdown(TypedDict):
    """Computed pay of a single shift, every amount rounded to cents"""
    job: str
    differential_class: str
    differential: Decimal
    job_matched: bool

    regular_rate: Decimal
    overtime_rate: Decimal

    regular_pay: Decimal
    overtime_pay: Decimal
    travel_pay: Decimal
    meal_pay: Decimal

    total_pay: Decimal


class HoursOverride(TypedDict):
    """Fixed hours for a job/location/shift type combination"""
    hours: Decimal
    overtime_hours: Decimal
