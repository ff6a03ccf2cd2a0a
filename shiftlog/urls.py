# shiftlog/urls.py
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from django.contrib import admin
from django.urls import include, path

from .health import health_check


@api_view(["GET"])
@permission_classes([AllowAny])
def api_root(request):
    """API root endpoint showing available endpoints"""
    return Response(
        {
            "message": "Shift accounting API",
            "version": "1.0",
            "endpoints": {
                "shifts": "/api/v1/shifts/entries/",
                "pay_calculation": "/api/v1/payroll/calculate/",
                "jobs": "/api/v1/payroll/jobs/",
                "holidays": "/api/v1/integrations/holidays/",
                "profile": "/api/v1/users/profile/",
            },
        }
    )


urlpatterns = [
    path("admin/", admin.site.urls),
    path("health/", health_check, name="health-check"),
    path("api/v1/", api_root, name="api-v1-root"),
    path("api/v1/shifts/", include("shifts.urls")),
    path("api/v1/payroll/", include("payroll.urls")),
    path("api/v1/integrations/", include("integrations.urls")),
    path("api/v1/users/", include("users.urls")),
]
