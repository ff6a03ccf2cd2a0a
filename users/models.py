# users/models.py
import logging
from typing import NamedTuple, Tuple

from django.contrib.auth.models import User
from django.core.exceptions import ValidationError
from django.db import models

from core.logging_utils import hash_user_id

logger = logging.getLogger(__name__)


class CounterClamp(NamedTuple):
    """A decrement that would have taken a counter below zero"""

    field: str
    requested: int
    applied: int


class LedgerChange(NamedTuple):
    xp: int
    points: int
    sick_days_used: int
    personal_leave_used: int
    clamps: Tuple[CounterClamp, ...] = ()


class UserLedger(models.Model):
    """
    Per-user aggregate of derived counters (leave usage, XP, points).

    Counters are changed only through apply_changes(), on a row the caller
    has locked with select_for_update().
    """

    COUNTER_FIELDS = ("xp", "points", "sick_days_used", "personal_leave_used")

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="ledger")

    xp = models.PositiveIntegerField(default=0, help_text="Lifetime experience points")
    points = models.PositiveIntegerField(default=0, help_text="Lifetime points")
    sick_days_used = models.PositiveIntegerField(default=0)
    personal_leave_used = models.PositiveIntegerField(default=0)

    # Configured allowances, independent of usage
    sick_days_available = models.PositiveIntegerField(default=5)
    personal_leave_available = models.PositiveIntegerField(default=3)
    sick_leave_start = models.DateField(null=True, blank=True)
    sick_leave_end = models.DateField(null=True, blank=True)
    personal_leave_start = models.DateField(null=True, blank=True)
    personal_leave_end = models.DateField(null=True, blank=True)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "User Ledger"
        verbose_name_plural = "User Ledgers"

    def clean(self):
        super().clean()
        for start, end in (
            ("sick_leave_start", "sick_leave_end"),
            ("personal_leave_start", "personal_leave_end"),
        ):
            start_value, end_value = getattr(self, start), getattr(self, end)
            if start_value and end_value and end_value < start_value:
                raise ValidationError({end: "Period end must not be before its start"})

    def apply_changes(self, sick=0, personal=0, xp=0, points=0):
        """
        Add the given deltas to the counters and save.

        A counter never goes below zero: a decrement past zero is clamped,
        logged and reported in the returned LedgerChange.
        """
        requested = {
            "sick_days_used": sick,
            "personal_leave_used": personal,
            "xp": xp,
            "points": points,
        }
        clamps = []
        changed = []
        for field, delta in requested.items():
            if not delta:
                continue
            current = getattr(self, field)
            new_value = current + delta
            if new_value < 0:
                clamps.append(CounterClamp(field, delta, -current))
                logger.warning(
                    "Ledger counter clamped at zero",
                    extra={
                        "user_hash": hash_user_id(self.user_id),
                        "field": field,
                        "requested": delta,
                        "current": current,
                    },
                )
                new_value = 0
            if new_value != current:
                setattr(self, field, new_value)
                changed.append(field)

        if changed:
            self.save(update_fields=changed + ["updated_at"])

        return LedgerChange(
            xp=self.xp,
            points=self.points,
            sick_days_used=self.sick_days_used,
            personal_leave_used=self.personal_leave_used,
            clamps=tuple(clamps),
        )

    @property
    def sick_days_remaining(self):
        return max(self.sick_days_available - self.sick_days_used, 0)

    @property
    def personal_leave_remaining(self):
        return max(self.personal_leave_available - self.personal_leave_used, 0)

    def __str__(self):
        return f"Ledger for {self.user.username} ({self.xp} XP)"
