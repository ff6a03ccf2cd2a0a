"""
Rate-override source: location/job/shift-type specific fixed hours.

Consulted by callers before computing pay; the calculator itself never reads
it. Overrides are cached and the cache is dropped whenever a PayOverride row
changes.
"""

import logging
from typing import Iterable, List, Optional

from django.conf import settings
from django.core.cache import cache

from .calculator import to_decimal
from .contracts import HoursOverride

logger = logging.getLogger(__name__)

PAY_OVERRIDES_CACHE_KEY = "payroll:pay_overrides"


def _cache_timeout() -> int:
    return settings.SHIFT_ACCOUNTING.get("PAY_OVERRIDE_CACHE_TIMEOUT", 3600)


def load_pay_overrides() -> List[dict]:
    """All overrides as plain dicts, served from cache when possible"""
    overrides = cache.get(PAY_OVERRIDES_CACHE_KEY)
    if overrides is not None:
        return overrides

    from payroll.models import PayOverride

    overrides = list(
        PayOverride.objects.values(
            "job", "subjob", "location", "shift_type", "hours", "overtime_hours"
        )
    )
    cache.set(PAY_OVERRIDES_CACHE_KEY, overrides, _cache_timeout())
    logger.debug("Loaded %d pay overrides into cache", len(overrides))
    return overrides


def clear_pay_overrides_cache() -> None:
    cache.delete(PAY_OVERRIDES_CACHE_KEY)


def get_hours_override(
    job: str,
    subjob: Optional[str],
    location: str,
    shift_type: str,
    overrides: Optional[Iterable[dict]] = None,
) -> Optional[HoursOverride]:
    """
    Find the fixed hours for a job/subjob/location/shift type.

    Matching is case-insensitive. With a subjob, only overrides for that exact
    subjob match; without one, only overrides that have no subjob match.

    Returns:
        HoursOverride or None when nothing matches
    """
    if not job or not location or not shift_type:
        return None
    if overrides is None:
        overrides = load_pay_overrides()

    job_key = job.upper()
    location_key = location.upper()
    shift_key = shift_type.upper()
    subjob_key = subjob.upper() if subjob else None

    for override in overrides:
        if override["job"].upper() != job_key:
            continue
        if override["location"].upper() != location_key:
            continue
        if override["shift_type"].upper() != shift_key:
            continue
        override_subjob = (override.get("subjob") or "").upper()
        if subjob_key is not None and override_subjob != subjob_key:
            continue
        if subjob_key is None and override_subjob:
            continue
        return HoursOverride(
            hours=to_decimal(override["hours"]),
            overtime_hours=to_decimal(override["overtime_hours"]),
        )
    return None
