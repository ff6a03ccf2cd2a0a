import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .filters import ShiftEntryFilter
from .models import ShiftEntry
from .serializers import ShiftEntrySerializer
from .services.accounting import ShiftAccountingService

logger = logging.getLogger(__name__)

LEDGER_STATUS_HEADER = "X-Ledger-Status"


class ShiftEntryViewSet(viewsets.ModelViewSet):
    """
    The current user's shift entries.

    Reads are plain owner-scoped queries; every write goes through
    ShiftAccountingService so the user's ledger follows the entry. When the
    best-effort ledger step fails the write still succeeds and the response
    carries ``X-Ledger-Status: failed``.
    """

    queryset = ShiftEntry.objects.all()
    serializer_class = ShiftEntrySerializer
    permission_classes = [IsAuthenticated]
    filter_backends = [DjangoFilterBackend]
    filterset_class = ShiftEntryFilter
    accounting = ShiftAccountingService()

    def get_queryset(self):
        return ShiftEntry.objects.for_owner(self.request.user).order_by("-date", "-created_at")

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.accounting.create_shift(request.user, serializer.validated_data)
        return self._mutation_response(result, status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        result = self.accounting.update_shift(
            request.user, instance.pk, serializer.validated_data
        )
        return self._mutation_response(result, status.HTTP_200_OK)

    def destroy(self, request, *args, **kwargs):
        result = self.accounting.delete_shift(request.user, kwargs[self.lookup_field])
        response = Response(status=status.HTTP_204_NO_CONTENT)
        return self._with_ledger_status(response, result)

    def _mutation_response(self, result, status_code):
        response = Response(self.get_serializer(result.shift).data, status=status_code)
        return self._with_ledger_status(response, result)

    def _with_ledger_status(self, response, result):
        response[LEDGER_STATUS_HEADER] = "ok" if result.ledger_ok else "failed"
        return response
