import logging
from datetime import timedelta

from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated

from django.utils import timezone

from shifts.models import ShiftEntry

from .models import Holiday
from .serializers import HolidaySerializer

logger = logging.getLogger(__name__)


class HolidayViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Statutory holidays with the caller's qualification.

    Query parameters:
        upcoming (bool): only holidays from one week ago onwards
        year (int): only holidays in the given year
    """

    queryset = Holiday.objects.all().order_by("date")
    serializer_class = HolidaySerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None  # small reference table

    def get_queryset(self):
        queryset = super().get_queryset()
        params = self.request.query_params

        if params.get("upcoming", "").lower() in ("1", "true", "yes"):
            queryset = queryset.filter(
                date__gte=timezone.localdate() - timedelta(weeks=1)
            )

        year = params.get("year")
        if year and year.isdigit():
            queryset = queryset.filter(date__year=int(year))

        return queryset

    def get_serializer_context(self):
        context = super().get_serializer_context()
        if self.request.user.is_authenticated:
            context["worked_dates"] = list(
                ShiftEntry.objects.for_owner(self.request.user).worked_dates()
            )
        return context
