import django_filters

from .enums import EntryType, LeaveType
from .models import ShiftEntry


class ShiftEntryFilter(django_filters.FilterSet):
    start = django_filters.DateFilter(field_name="date", lookup_expr="gte")
    end = django_filters.DateFilter(field_name="date", lookup_expr="lte")
    entry_type = django_filters.ChoiceFilter(choices=EntryType.choices())
    leave_type = django_filters.ChoiceFilter(choices=LeaveType.choices())

    class Meta:
        model = ShiftEntry
        fields = ["start", "end", "entry_type", "leave_type"]
