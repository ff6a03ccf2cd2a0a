"""
Badge levels and progress towards the next one.
"""

from typing import NamedTuple, Optional


class BadgeLevel(NamedTuple):
    level: int
    name: str
    min_xp: int
    max_xp: Optional[int]  # None for the top tier


BADGE_LEVELS = (
    BadgeLevel(1, "New Guy", 0, 199),
    BadgeLevel(2, "Casual", 200, 499),
    BadgeLevel(3, "Member", 500, 999),
    BadgeLevel(4, "Real Longshore", 1000, None),
)


class LevelProgress(NamedTuple):
    current: int
    required: int
    percent: int


def badge_level(total_xp: int) -> BadgeLevel:
    """Highest tier whose lower bound is <= total_xp"""
    for tier in reversed(BADGE_LEVELS):
        if total_xp >= tier.min_xp:
            return tier
    return BADGE_LEVELS[0]


def progress_to_next_level(total_xp: int) -> LevelProgress:
    tier = badge_level(total_xp)
    index = BADGE_LEVELS.index(tier)

    if index == len(BADGE_LEVELS) - 1:
        return LevelProgress(current=total_xp, required=total_xp, percent=100)

    next_tier = BADGE_LEVELS[index + 1]
    current = total_xp - tier.min_xp
    required = next_tier.min_xp - tier.min_xp
    percent = min((100 * current) // required, 100)
    return LevelProgress(current=current, required=required, percent=percent)
