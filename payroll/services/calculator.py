"""
Shift pay calculator.

Pay is the sum of four components: regular hours at the job's regular rate,
overtime hours at the overtime rate, travel hours at a flat travel rate, and an
optional half-hour meal premium that is always priced at the overtime rate.
Every intermediate amount is rounded to cents before it is summed.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

from .contracts import PayBreakdown, PayInput
from .rates import lookup_differential

logger = logging.getLogger(__name__)

BASE_RATE = Decimal("55.30")
TRAVEL_RATE = Decimal("53.17")
MEAL_HOURS = Decimal("0.5")
OVERTIME_MULTIPLIER = Decimal("1.5")

CENTS = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """Convert hours/amounts to Decimal; None counts as zero"""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round2(value) -> Decimal:
    """
    Round to cents, halves away from zero, on the exact decimal value.

    Binary-float rounding would take some exact halves down (0.25 h at 55.30 is
    13.825, which floats store as 13.8249...); here it is always 13.83.
    """
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_regular_rate(differential: Decimal) -> Decimal:
    return round2(BASE_RATE + to_decimal(differential))


def calculate_overtime_rate(differential: Decimal) -> Decimal:
    return round2(BASE_RATE * OVERTIME_MULTIPLIER + to_decimal(differential))


def calculate_shift_pay(pay_input: PayInput) -> PayBreakdown:
    """
    Compute the pay breakdown of one shift.

    Pure: no I/O and no error path. An unknown job is priced at the BASE
    differential and flagged with ``job_matched=False``.

    Args:
        pay_input: job, hours, overtime_hours, travel_hours, include_meal

    Returns:
        PayBreakdown with rates, per-component pay and total_pay
    """
    job = pay_input.get("job") or ""
    lookup = lookup_differential(job)

    regular_rate = calculate_regular_rate(lookup.amount)
    overtime_rate = calculate_overtime_rate(lookup.amount)

    regular_pay = round2(to_decimal(pay_input.get("hours")) * regular_rate)
    overtime_pay = round2(to_decimal(pay_input.get("overtime_hours")) * overtime_rate)
    travel_pay = round2(to_decimal(pay_input.get("travel_hours")) * TRAVEL_RATE)
    meal_pay = (
        round2(MEAL_HOURS * overtime_rate)
        if pay_input.get("include_meal")
        else Decimal("0.00")
    )

    total_pay = round2(regular_pay + overtime_pay + travel_pay + meal_pay)

    logger.debug(
        "Pay computed for job %r: regular=%s overtime=%s travel=%s meal=%s total=%s",
        job, regular_pay, overtime_pay, travel_pay, meal_pay, total_pay,
    )

    return PayBreakdown(
        job=job,
        differential_class=str(lookup.differential_class),
        differential=lookup.amount,
        job_matched=lookup.matched,
        regular_rate=regular_rate,
        overtime_rate=overtime_rate,
        regular_pay=regular_pay,
        overtime_pay=overtime_pay,
        travel_pay=travel_pay,
        meal_pay=meal_pay,
        total_pay=total_pay,
    )
