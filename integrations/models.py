from django.core.exceptions import ValidationError
from django.db import models

from .services.holiday_qualification import qualifying_window


class Holiday(models.Model):
    """Statutory holiday with an optional explicit qualifying window"""

    date = models.DateField(unique=True)
    name = models.CharField(max_length=100)
    qualifying_start = models.DateField(
        null=True,
        blank=True,
        help_text="First day of the qualifying window (defaults to 28 days before the holiday)",
    )
    qualifying_end = models.DateField(
        null=True,
        blank=True,
        help_text="Last day of the qualifying window (defaults to the holiday itself)",
    )

    def __str__(self):
        return f"{self.name} - {self.date}"

    class Meta:
        verbose_name = "Holiday"
        verbose_name_plural = "Holidays"
        ordering = ["date"]

    def clean(self):
        super().clean()
        if self.date is None:
            return
        start, end = self.window
        if end < start:
            raise ValidationError(
                {"qualifying_end": "Qualifying window must end on or after its start"}
            )

    @property
    def window(self):
        """(start, end) of the qualifying window, defaults applied"""
        return qualifying_window(self.date, self.qualifying_start, self.qualifying_end)
