"""
XP and points awarded for logged shifts.
"""

from decimal import Decimal
from typing import NamedTuple, Optional

from django.conf import settings

XP_PER_SHIFT = 10
PAY_PER_POINT = Decimal("10")


class RewardDelta(NamedTuple):
    xp: int = 0
    points: int = 0

    @property
    def is_zero(self) -> bool:
        return self.xp == 0 and self.points == 0


def xp_for_entry(entry_type: Optional[str]) -> int:
    """Flat XP per logged day, whatever the entry type"""
    return XP_PER_SHIFT


def points_for_pay(total_pay) -> int:
    """One point per full 10 of pay; no pay means no points"""
    if not total_pay:
        return 0
    if not isinstance(total_pay, Decimal):
        total_pay = Decimal(str(total_pay))
    return max(int(total_pay // PAY_PER_POINT), 0)


def rewards_for_created_entry(entry_type: str, points_earned: int) -> RewardDelta:
    return RewardDelta(xp=xp_for_entry(entry_type), points=points_earned)


def rewards_reversed_on_delete(entry_type: str, points_earned: int) -> RewardDelta:
    """
    XP/points to take back when a shift is deleted.

    Rewards are kept by default (lifetime XP and points never go down). With
    SHIFT_ACCOUNTING["REVERSE_REWARDS_ON_DELETE"] enabled, the XP and points
    the shift earned at creation are taken back.
    """
    if not settings.SHIFT_ACCOUNTING.get("REVERSE_REWARDS_ON_DELETE", False):
        return RewardDelta()
    return RewardDelta(xp=-xp_for_entry(entry_type), points=-(points_earned or 0))
