"""
Tests for the shift pay calculator: rates, per-component rounding and totals.
"""

from decimal import Decimal

from django.test import SimpleTestCase

from payroll.services.calculator import (
    BASE_RATE,
    TRAVEL_RATE,
    calculate_overtime_rate,
    calculate_regular_rate,
    calculate_shift_pay,
    round2,
)
from payroll.services.enums import DifferentialClass
from payroll.services.rates import JOB_DIFFERENTIALS


class RateTest(SimpleTestCase):
    """Regular and overtime rates built from the base rate and a differential"""

    def test_base_and_travel_rates(self):
        self.assertEqual(BASE_RATE, Decimal("55.30"))
        self.assertEqual(TRAVEL_RATE, Decimal("53.17"))

    def test_regular_rate_adds_differential(self):
        self.assertEqual(calculate_regular_rate(Decimal("0.00")), Decimal("55.30"))
        self.assertEqual(calculate_regular_rate(Decimal("0.65")), Decimal("55.95"))
        self.assertEqual(calculate_regular_rate(Decimal("2.50")), Decimal("57.80"))

    def test_overtime_rate_is_time_and_a_half_plus_differential(self):
        # 55.30 * 1.5 = 82.95
        self.assertEqual(calculate_overtime_rate(Decimal("0.00")), Decimal("82.95"))
        self.assertEqual(calculate_overtime_rate(Decimal("0.65")), Decimal("83.60"))
        self.assertEqual(calculate_overtime_rate(Decimal("2.50")), Decimal("85.45"))

    def test_round2_rounds_half_up(self):
        self.assertEqual(round2(Decimal("1.005")), Decimal("1.01"))
        self.assertEqual(round2(Decimal("1.004")), Decimal("1.00"))
        self.assertEqual(round2(None), Decimal("0.00"))

    def test_exact_halves_round_up_where_binary_floats_round_down(self):
        # 13.825, 41.475 and 124.425 are not representable as floats
        for hours, expected in (("0.25", "13.83"), ("0.75", "41.48"), ("2.25", "124.43")):
            result = calculate_shift_pay({"job": "Labour", "hours": Decimal(hours)})
            self.assertEqual(result["regular_pay"], Decimal(expected))


class CalculateShiftPayTest(SimpleTestCase):
    """Totals for representative shifts"""

    def test_labour_eight_hours(self):
        result = calculate_shift_pay({"job": "Labour", "hours": 8, "overtime_hours": 0})
        self.assertEqual(result["regular_pay"], Decimal("442.40"))
        self.assertEqual(result["overtime_pay"], Decimal("0.00"))
        self.assertEqual(result["total_pay"], Decimal("442.40"))
        self.assertTrue(result["job_matched"])

    def test_tractor_trailer_with_overtime(self):
        result = calculate_shift_pay(
            {"job": "Tractor Trailer", "hours": 8, "overtime_hours": 2}
        )
        self.assertEqual(result["regular_rate"], Decimal("55.95"))
        self.assertEqual(result["overtime_rate"], Decimal("83.60"))
        self.assertEqual(result["regular_pay"], Decimal("447.60"))
        self.assertEqual(result["overtime_pay"], Decimal("167.20"))
        self.assertEqual(result["total_pay"], Decimal("614.80"))

    def test_missing_hour_fields_default_to_zero(self):
        result = calculate_shift_pay({"job": "Labour"})
        self.assertEqual(result["total_pay"], Decimal("0.00"))

    def test_travel_is_flat_rate_regardless_of_job(self):
        labour = calculate_shift_pay({"job": "Labour", "travel_hours": 1})
        mechanic = calculate_shift_pay({"job": "Hd Mechanic", "travel_hours": 1})
        self.assertEqual(labour["travel_pay"], Decimal("53.17"))
        self.assertEqual(mechanic["travel_pay"], Decimal("53.17"))

    def test_meal_priced_at_overtime_rate_without_overtime(self):
        result = calculate_shift_pay(
            {"job": "Labour", "hours": 8, "include_meal": True}
        )
        # 0.5 * 82.95 = 41.475 -> 41.48
        self.assertEqual(result["meal_pay"], Decimal("41.48"))
        self.assertEqual(result["total_pay"], Decimal("483.88"))

    def test_meal_excluded_by_default(self):
        result = calculate_shift_pay({"job": "Labour", "hours": 8})
        self.assertEqual(result["meal_pay"], Decimal("0.00"))

    def test_all_components(self):
        result = calculate_shift_pay(
            {
                "job": "Hd Mechanic",
                "hours": Decimal("8"),
                "overtime_hours": Decimal("1.5"),
                "travel_hours": Decimal("0.5"),
                "include_meal": True,
            }
        )
        # regular 8 * 57.80 = 462.40
        # overtime 1.5 * 85.45 = 128.175 -> 128.18
        # travel 0.5 * 53.17 = 26.585 -> 26.59
        # meal 0.5 * 85.45 = 42.725 -> 42.73
        self.assertEqual(result["regular_pay"], Decimal("462.40"))
        self.assertEqual(result["overtime_pay"], Decimal("128.18"))
        self.assertEqual(result["travel_pay"], Decimal("26.59"))
        self.assertEqual(result["meal_pay"], Decimal("42.73"))
        self.assertEqual(result["total_pay"], Decimal("659.90"))

    def test_float_inputs_are_accepted(self):
        result = calculate_shift_pay({"job": "Labour", "hours": 7.5})
        self.assertEqual(result["regular_pay"], Decimal("414.75"))

    def test_unknown_job_falls_back_to_base_and_is_flagged(self):
        result = calculate_shift_pay({"job": "Unknown Job", "hours": 8})
        self.assertFalse(result["job_matched"])
        self.assertEqual(result["differential_class"], "BASE")
        self.assertEqual(result["total_pay"], Decimal("442.40"))

    def test_regular_pay_uses_rounded_rate_for_every_job(self):
        for job, differential_class in JOB_DIFFERENTIALS.items():
            for hours in (Decimal("1"), Decimal("7.25"), Decimal("12")):
                result = calculate_shift_pay({"job": job, "hours": hours})
                rate = round2(Decimal("55.30") + differential_class.amount)
                self.assertEqual(result["regular_pay"], round2(hours * rate), job)
                self.assertGreaterEqual(result["total_pay"], Decimal("0"))


class DifferentialClassTest(SimpleTestCase):
    def test_amounts(self):
        self.assertEqual(DifferentialClass.BASE.amount, Decimal("0.00"))
        self.assertEqual(DifferentialClass.CLASS_1.amount, Decimal("2.50"))
        self.assertEqual(DifferentialClass.CLASS_2.amount, Decimal("1.50"))
        self.assertEqual(DifferentialClass.CLASS_3.amount, Decimal("0.65"))
        self.assertEqual(DifferentialClass.CLASS_4.amount, Decimal("0.40"))
