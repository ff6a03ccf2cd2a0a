"""
Enumerations for shift entries.
"""

from enum import Enum


class _ChoicesEnum(Enum):
    def __str__(self):
        return self.value

    @classmethod
    def choices(cls):
        """(value, label) pairs for model and serializer fields"""
        return [(member.value, member.label) for member in cls]

    @classmethod
    def values(cls):
        return [member.value for member in cls]

    @property
    def label(self):
        return self.value.replace("_", " ").title()


class EntryType(_ChoicesEnum):
    """Category of a logged day; decides which other fields are meaningful"""

    WORKED = "worked"
    """A paid shift on a job at a location"""

    LEAVE = "leave"
    """Sick, personal or parental leave"""

    VACATION = "vacation"
    STANDBY = "standby"

    STAT_HOLIDAY = "stat_holiday"
    """Statutory holiday pay"""

    DAY_OFF = "day_off"


class LeaveType(_ChoicesEnum):
    SICK = "sick_leave"
    PERSONAL = "personal_leave"
    PARENTAL = "parental_leave"
    """Not counted against any allowance"""


class ShiftType(_ChoicesEnum):
    DAY = "day"
    NIGHT = "night"
    GRAVEYARD = "graveyard"
