from django.db import models
from django.db.models import Count

from .enums import EntryType, LeaveType


class ShiftEntryQuerySet(models.QuerySet):
    def for_owner(self, user):
        return self.filter(owner=user)

    def in_range(self, start=None, end=None):
        queryset = self
        if start:
            queryset = queryset.filter(date__gte=start)
        if end:
            queryset = queryset.filter(date__lte=end)
        return queryset

    def worked(self):
        return self.filter(entry_type=EntryType.WORKED.value)

    def worked_dates(self, start=None, end=None):
        """Distinct dates with a worked entry, most recent first"""
        return (
            self.worked()
            .in_range(start, end)
            .order_by("-date")
            .values_list("date", flat=True)
            .distinct()
        )

    def leave_usage(self):
        """Stored leave entries per counted leave type"""
        counts = dict(
            self.filter(entry_type=EntryType.LEAVE.value)
            .values_list("leave_type")
            .annotate(n=Count("id"))
            .order_by()
        )
        return {
            LeaveType.SICK.value: counts.get(LeaveType.SICK.value, 0),
            LeaveType.PERSONAL.value: counts.get(LeaveType.PERSONAL.value, 0),
        }
