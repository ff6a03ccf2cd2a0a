"""
Pay calculation and job reference endpoints
"""

import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers import PayBreakdownSerializer, PayCalculationQuerySerializer
from ..services.calculator import calculate_shift_pay
from ..services.overrides import get_hours_override
from ..services.rates import known_jobs

logger = logging.getLogger(__name__)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def calculate_pay(request):
    """
    Preview the pay of a shift.

    Hours default to 8 regular and 0 overtime. When a location is given and a
    pay override matches the job/subjob/location/shift type, the override's
    hours replace the requested ones.
    """
    query = PayCalculationQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    params = query.validated_data

    hours = params["hours"]
    overtime_hours = params["overtime_hours"]
    override = None
    if params["location"]:
        override = get_hours_override(
            params["job"],
            params["subjob"] or None,
            params["location"],
            params["shift_type"],
        )
        if override:
            hours = override["hours"]
            overtime_hours = override["overtime_hours"]

    breakdown = calculate_shift_pay(
        {
            "job": params["job"],
            "hours": hours,
            "overtime_hours": overtime_hours,
            "travel_hours": params["travel_hours"],
            "include_meal": params["meal"],
        }
    )

    payload = PayBreakdownSerializer(
        {
            **breakdown,
            "subjob": params["subjob"],
            "location": params["location"],
            "shift_type": params["shift_type"],
            "hours": hours,
            "overtime_hours": overtime_hours,
            "travel_hours": params["travel_hours"],
            "override_applied": override is not None,
        }
    )
    return Response(payload.data, status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def job_list(request):
    """Jobs with their differential class and hourly add-on"""
    return Response(
        [
            {
                "job": entry.job,
                "differential_class": str(entry.differential_class),
                "differential": entry.amount,
            }
            for entry in known_jobs()
        ]
    )
