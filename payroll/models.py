from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class PayOverride(models.Model):
    """
    Fixed hours for a job at a location on a given shift type.

    When a calculation request matches an override, the override's hours
    replace the hours supplied by the caller.
    """

    job = models.CharField(max_length=100)
    subjob = models.CharField(
        max_length=100,
        blank=True,
        default="",
        help_text="Blank when the override applies to the job without a subjob",
    )
    location = models.CharField(max_length=100)
    shift_type = models.CharField(
        max_length=20, help_text="DAY, NIGHT or GRAVEYARD (matched case-insensitively)"
    )
    hours = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0")), MaxValueValidator(Decimal("24"))],
    )
    overtime_hours = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal("0"),
        validators=[MinValueValidator(Decimal("0")), MaxValueValidator(Decimal("24"))],
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["job", "subjob", "location", "shift_type"]
        verbose_name = "Pay Override"
        verbose_name_plural = "Pay Overrides"
        constraints = [
            models.UniqueConstraint(
                fields=["job", "subjob", "location", "shift_type"],
                name="uniq_pay_override_natural_key",
            ),
        ]

    def __str__(self):
        subjob = f" / {self.subjob}" if self.subjob else ""
        return f"{self.job}{subjob} @ {self.location} ({self.shift_type}): {self.hours}h + {self.overtime_hours}h OT"
