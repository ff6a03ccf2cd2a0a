"""
Shared pytest fixtures for the shiftlog apps
"""

import pytest

from django.core.cache import cache


@pytest.fixture(autouse=True)
def clear_cache():
    """Cached pay overrides must not leak from one test into the next"""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def reverse_rewards_on_delete(settings):
    """Deleting a shift takes its XP and points back off the ledger"""
    settings.SHIFT_ACCOUNTING = {**settings.SHIFT_ACCOUNTING, "REVERSE_REWARDS_ON_DELETE": True}
    return settings
