"""
Liveness probe: the record store and the pay-override cache must both answer.
"""

import logging

from django.core.cache import cache
from django.db import connection
from django.http import JsonResponse
from django.utils import timezone

logger = logging.getLogger(__name__)


def _database():
    with connection.cursor() as cursor:
        cursor.execute("SELECT 1")


def _cache():
    cache.set("shiftlog:health", "ok", 10)
    cache.get("shiftlog:health")


CHECKS = (
    ("database", _database, "Database connection failed"),
    ("cache", _cache, "Cache service unavailable"),
)


def health_check(request):
    """200 when every check passes, 503 otherwise"""
    services = {}
    for name, check, failure in CHECKS:
        try:
            check()
        except Exception:
            logger.exception("Health check failed: %s", name)
            services[name] = {"status": "unhealthy", "error": failure}
        else:
            services[name] = {"status": "healthy"}

    healthy = all(s["status"] == "healthy" for s in services.values())
    return JsonResponse(
        {
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )
