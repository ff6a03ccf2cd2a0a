from decimal import Decimal

from django.contrib.auth.models import User
from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from core.exceptions import ShiftValidationError

from .enums import EntryType, LeaveType, ShiftType
from .querysets import ShiftEntryQuerySet
from .variants import QUALIFYING_DAYS_BUCKETS, variant_for

HOURS_VALIDATORS = [MinValueValidator(Decimal("0")), MaxValueValidator(Decimal("24"))]
NON_NEGATIVE = [MinValueValidator(Decimal("0"))]


class ShiftEntry(models.Model):
    """One logged day: a worked shift, leave, a stat holiday or a plain day entry"""

    owner = models.ForeignKey(User, on_delete=models.CASCADE, related_name="shift_entries")
    date = models.DateField()
    entry_type = models.CharField(max_length=20, choices=EntryType.choices())

    # leave
    leave_type = models.CharField(
        max_length=20, choices=LeaveType.choices(), blank=True, default=""
    )

    # worked
    job = models.CharField(max_length=100, blank=True, default="")
    subjob = models.CharField(max_length=100, blank=True, default="")
    location = models.CharField(max_length=100, blank=True, default="")
    shift_type = models.CharField(
        max_length=20, choices=ShiftType.choices(), blank=True, default=""
    )
    overtime_hours = models.DecimalField(
        max_digits=5, decimal_places=2, default=Decimal("0"), validators=HOURS_VALIDATORS
    )
    travel_hours = models.DecimalField(
        max_digits=5, decimal_places=2, default=Decimal("0"), validators=HOURS_VALIDATORS
    )
    overtime_rate = models.DecimalField(
        max_digits=8, decimal_places=2, null=True, blank=True, validators=NON_NEGATIVE
    )
    meal = models.BooleanField(default=False, help_text="Half-hour meal premium at the overtime rate")
    foreman = models.CharField(max_length=100, blank=True, default="")
    vessel = models.CharField(max_length=100, blank=True, default="")

    # stat holiday
    holiday = models.CharField(max_length=100, blank=True, default="")
    qualifying_days = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        choices=sorted(QUALIFYING_DAYS_BUCKETS.items()),
        help_text="Days worked in the qualifying window: 14 = 1-14, 15 = 15+",
    )

    # common
    hours = models.DecimalField(
        max_digits=5, decimal_places=2, default=Decimal("0"), validators=HOURS_VALIDATORS
    )
    rate = models.DecimalField(
        max_digits=8, decimal_places=2, null=True, blank=True, validators=NON_NEGATIVE
    )
    total_pay = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True, validators=NON_NEGATIVE
    )
    points_earned = models.PositiveIntegerField(
        default=0, help_text="Set when the entry is created, never recomputed"
    )
    will_receive_paystub = models.BooleanField(default=False)
    notes = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ShiftEntryQuerySet.as_manager()

    class Meta:
        ordering = ["-date", "-created_at"]
        verbose_name = "Shift Entry"
        verbose_name_plural = "Shift Entries"
        indexes = [
            models.Index(fields=["owner", "date"], name="shift_owner_date_idx"),
            models.Index(fields=["owner", "entry_type"], name="shift_owner_type_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(total_pay__isnull=True) | models.Q(total_pay__gte=0),
                name="shift_total_pay_non_negative",
            ),
        ]

    def clean(self):
        super().clean()
        try:
            variant_for(self)
        except ShiftValidationError as e:
            raise ValidationError(e.details or e.message)

    @property
    def variant(self):
        return variant_for(self)

    @property
    def is_leave(self):
        return self.entry_type == EntryType.LEAVE.value

    def save(self, *args, **kwargs):
        # Validate before saving
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.date} {self.entry_type} (owner {self.owner_id})"
