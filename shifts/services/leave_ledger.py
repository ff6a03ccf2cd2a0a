"""
Leave ledger reconciliation.

Each stored leave entry counts one day against the matching allowance
(sick_leave -> sick_days_used, personal_leave -> personal_leave_used;
parental leave is not counted). reconcile_leave() turns a change of an
entry's classification into counter deltas; the ledger applies them and
clamps at zero.
"""

import logging
from typing import NamedTuple, Optional

from django.db import transaction

from core.logging_utils import hash_user_id

from ..enums import EntryType, LeaveType

logger = logging.getLogger(__name__)


class LeaveState(NamedTuple):
    """The part of a shift entry that the leave counters depend on"""

    entry_type: str
    leave_type: Optional[str] = None

    @property
    def counted_leave(self) -> Optional[str]:
        """Leave type counted against an allowance, if any"""
        if self.entry_type != EntryType.LEAVE.value:
            return None
        return self.leave_type or None


class LeaveDelta(NamedTuple):
    sick: int = 0
    personal: int = 0

    @property
    def is_zero(self) -> bool:
        return self.sick == 0 and self.personal == 0

    def __add__(self, other):
        return LeaveDelta(self.sick + other.sick, self.personal + other.personal)


def _delta_for(leave_type: Optional[str], amount: int) -> LeaveDelta:
    if leave_type == LeaveType.SICK.value:
        return LeaveDelta(sick=amount)
    if leave_type == LeaveType.PERSONAL.value:
        return LeaveDelta(personal=amount)
    return LeaveDelta()


def reconcile_leave(prior: Optional[LeaveState], next_state: Optional[LeaveState]) -> LeaveDelta:
    """
    Counter deltas for an entry moving from ``prior`` to ``next_state``.

    ``prior`` is None for a create and ``next_state`` is None for a delete.
    Moving between two leave types takes one day off the old counter and
    adds one to the new one; same-type or non-leave changes are a no-op.
    """
    before = prior.counted_leave if prior else None
    after = next_state.counted_leave if next_state else None

    if before == after:
        return LeaveDelta()
    return _delta_for(before, -1) + _delta_for(after, 1)


def rebuild_leave_usage(user, apply=True) -> LeaveDelta:
    """
    Recount the user's leave counters from stored shift entries.

    Returns the correction (stored count minus ledger value). With
    ``apply=False`` the correction is only computed.
    """
    from shifts.models import ShiftEntry
    from users.models import UserLedger

    with transaction.atomic():
        ledger, _ = UserLedger.objects.select_for_update().get_or_create(user=user)
        usage = ShiftEntry.objects.for_owner(user).leave_usage()
        correction = LeaveDelta(
            sick=usage[LeaveType.SICK.value] - ledger.sick_days_used,
            personal=usage[LeaveType.PERSONAL.value] - ledger.personal_leave_used,
        )

        if correction.is_zero:
            return correction

        logger.info(
            "Leave ledger drift found",
            extra={
                "user_hash": hash_user_id(user.pk),
                "sick_correction": correction.sick,
                "personal_correction": correction.personal,
                "applied": apply,
            },
        )
        if apply:
            ledger.apply_changes(sick=correction.sick, personal=correction.personal)

    return correction
