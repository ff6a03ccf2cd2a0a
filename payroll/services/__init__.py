# Payroll services package

from .calculator import (
    BASE_RATE,
    MEAL_HOURS,
    TRAVEL_RATE,
    calculate_overtime_rate,
    calculate_regular_rate,
    calculate_shift_pay,
)
from .overrides import clear_pay_overrides_cache, get_hours_override, load_pay_overrides
from .rates import get_differential_for_job, lookup_differential

__all__ = [
    "BASE_RATE",
    "MEAL_HOURS",
    "TRAVEL_RATE",
    "calculate_overtime_rate",
    "calculate_regular_rate",
    "calculate_shift_pay",
    "clear_pay_overrides_cache",
    "get_differential_for_job",
    "get_hours_override",
    "load_pay_overrides",
    "lookup_differential",
]
