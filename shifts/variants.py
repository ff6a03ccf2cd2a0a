"""
Entry-type variants of a shift entry.

A ShiftEntry is stored in one table, but each entry type populates its own
group of fields and leaves the others empty. variant_for() checks that shape
and returns the typed view of the entry:

    worked        -> WorkedEntry       (job, location, shift_type required)
    leave         -> LeaveEntry        (leave_type required)
    stat_holiday  -> StatHolidayEntry  (holiday required)
    anything else -> PlainEntry
"""

from decimal import Decimal
from typing import Dict, Iterable, NamedTuple, Optional, Union

from core.exceptions import ShiftValidationError

from .enums import EntryType, LeaveType, ShiftType

WORKED_FIELDS = (
    "job",
    "subjob",
    "location",
    "shift_type",
    "overtime_hours",
    "travel_hours",
    "overtime_rate",
    "meal",
    "foreman",
    "vessel",
)
LEAVE_FIELDS = ("leave_type",)
HOLIDAY_FIELDS = ("holiday", "qualifying_days")

VARIANT_FIELDS = {
    EntryType.WORKED.value: WORKED_FIELDS,
    EntryType.LEAVE.value: LEAVE_FIELDS,
    EntryType.STAT_HOLIDAY.value: HOLIDAY_FIELDS,
}

# Value a variant-specific field takes when it does not apply
EMPTY_VALUES = {
    "job": "",
    "subjob": "",
    "location": "",
    "shift_type": "",
    "overtime_hours": Decimal("0"),
    "travel_hours": Decimal("0"),
    "overtime_rate": None,
    "meal": False,
    "foreman": "",
    "vessel": "",
    "leave_type": "",
    "holiday": "",
    "qualifying_days": None,
}

QUALIFYING_DAYS_BUCKETS = {14: "1-14", 15: "15+"}


class WorkedEntry(NamedTuple):
    job: str
    location: str
    shift_type: str
    subjob: str = ""


class LeaveEntry(NamedTuple):
    leave_type: str


class StatHolidayEntry(NamedTuple):
    holiday: str
    qualifying_days: Optional[int] = None


class PlainEntry(NamedTuple):
    entry_type: str


ShiftVariant = Union[WorkedEntry, LeaveEntry, StatHolidayEntry, PlainEntry]


def _is_empty(value) -> bool:
    if value is None or value is False or value == "":
        return True
    return isinstance(value, (int, Decimal)) and value == 0


def foreign_fields(entry_type: str) -> Iterable[str]:
    """Variant-specific fields that do not belong to ``entry_type``"""
    own = VARIANT_FIELDS.get(entry_type, ())
    for fields in VARIANT_FIELDS.values():
        for field in fields:
            if field not in own:
                yield field


def clear_foreign_fields(entry, entry_type: str, keep: Iterable[str] = ()) -> None:
    """Reset fields that do not belong to ``entry_type``, except those in ``keep``"""
    keep = set(keep)
    for field in foreign_fields(entry_type):
        if field not in keep:
            setattr(entry, field, EMPTY_VALUES[field])


def variant_for(entry) -> ShiftVariant:
    """
    Typed view of a shift entry.

    Raises:
        ShiftValidationError: a required field of the entry's variant is
            missing, or a field of another variant is populated
    """
    entry_type = getattr(entry, "entry_type", None)
    if entry_type not in EntryType.values():
        raise ShiftValidationError(
            "Invalid entry type",
            details={"entry_type": [f"Must be one of: {', '.join(EntryType.values())}"]},
        )

    errors: Dict[str, list] = {}
    for field in foreign_fields(entry_type):
        if not _is_empty(getattr(entry, field, None)):
            errors[field] = [f"Not allowed for {entry_type} entries"]

    if entry_type == EntryType.WORKED.value:
        for field in ("job", "location", "shift_type"):
            if _is_empty(getattr(entry, field, None)):
                errors[field] = ["Required for worked entries"]
        if entry.shift_type and entry.shift_type not in ShiftType.values():
            errors["shift_type"] = [f"Must be one of: {', '.join(ShiftType.values())}"]
    elif entry_type == EntryType.LEAVE.value:
        if not entry.leave_type:
            errors["leave_type"] = ["Required for leave entries"]
        elif entry.leave_type not in LeaveType.values():
            errors["leave_type"] = [f"Must be one of: {', '.join(LeaveType.values())}"]
    elif entry_type == EntryType.STAT_HOLIDAY.value:
        if not entry.holiday:
            errors["holiday"] = ["Required for stat_holiday entries"]
        if entry.qualifying_days not in (None, *QUALIFYING_DAYS_BUCKETS):
            errors["qualifying_days"] = ["Must be 14 (1-14) or 15 (15+)"]

    if errors:
        raise ShiftValidationError(
            f"Invalid fields for a {entry_type} entry", details=errors
        )

    if entry_type == EntryType.WORKED.value:
        return WorkedEntry(entry.job, entry.location, entry.shift_type, entry.subjob or "")
    if entry_type == EntryType.LEAVE.value:
        return LeaveEntry(entry.leave_type)
    if entry_type == EntryType.STAT_HOLIDAY.value:
        return StatHolidayEntry(entry.holiday, entry.qualifying_days)
    return PlainEntry(entry_type)


def normalize_qualifying_days(value) -> Optional[int]:
    """
    Map a qualifying-days answer to its bucket: 14 ("1-14") or 15 ("15+").

    Accepts the bucket labels, the bucket numbers, or a day count.
    """
    if value is None or value == "":
        return None

    if isinstance(value, bool):
        raise ShiftValidationError(
            "Invalid qualifying days", details={"qualifying_days": ["Expected 1-14 or 15+"]}
        )

    if isinstance(value, str):
        text = value.strip()
        if text.startswith("15"):
            return 15
        if "14" in text:
            return 14
        try:
            value = int(text)
        except ValueError:
            raise ShiftValidationError(
                "Invalid qualifying days",
                details={"qualifying_days": ["Expected 1-14 or 15+"]},
            )

    days = int(value)
    if days >= 15:
        return 15
    if days >= 1:
        return 14
    raise ShiftValidationError(
        "Invalid qualifying days", details={"qualifying_days": ["Expected 1-14 or 15+"]}
    )
