import logging

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.logging_utils import safe_log_user
from shifts.models import ShiftEntry

from .models import UserLedger
from .serializers import UserProfileSerializer

logger = logging.getLogger(__name__)


def _profile_context(request):
    worked_dates = ShiftEntry.objects.for_owner(request.user).worked_dates()
    return {"request": request, "worked_dates": list(worked_dates)}


@api_view(["GET", "PATCH"])
@permission_classes([IsAuthenticated])
def profile(request):
    """
    Current user's ledger, badge, level progress and streak.

    PATCH updates leave allowances and allowance periods only.
    """
    ledger, _ = UserLedger.objects.get_or_create(user=request.user)

    if request.method == "PATCH":
        serializer = UserProfileSerializer(
            ledger, data=request.data, partial=True, context=_profile_context(request)
        )
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("Leave allowances updated", extra=safe_log_user(request.user, "profile_update"))
        return Response(serializer.data)

    serializer = UserProfileSerializer(ledger, context=_profile_context(request))
    return Response(serializer.data)
