"""
Shift accounting: create, update and delete shift entries and keep the
owner's ledger (leave counters, XP, points) in step with them.

The shift entry is the source of truth. It is validated before anything is
written and saved in a transaction; a store failure aborts the whole
mutation. The ledger step runs afterwards in its own savepoint on a locked
ledger row, so concurrent mutations for one user serialize on that row. A
failed ledger step is rolled back on its own, logged and returned on the
result; the shift entry still commits.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, NamedTuple, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, transaction

from core.exceptions import LedgerUpdateFailure, NotFoundError, ShiftValidationError, StoreError
from core.logging_utils import err_tag, hash_user_id, safe_log_shift
from gamification.scoring import (
    RewardDelta,
    points_for_pay,
    rewards_for_created_entry,
    rewards_reversed_on_delete,
)
from integrations.models import Holiday
from payroll.services.calculator import calculate_shift_pay
from payroll.services.contracts import PayBreakdown
from users.models import LedgerChange, UserLedger

from ..enums import EntryType
from ..models import ShiftEntry
from ..variants import clear_foreign_fields, normalize_qualifying_days
from .leave_ledger import LeaveDelta, LeaveState, reconcile_leave

logger = logging.getLogger(__name__)

# Changing any of these on a worked entry reprices it unless total_pay is supplied
PAY_INPUT_FIELDS = ("entry_type", "job", "hours", "overtime_hours", "travel_hours", "meal")

# Fields callers may set; owner and points_earned are decided here
WRITABLE_FIELDS = frozenset(
    field.name
    for field in ShiftEntry._meta.concrete_fields
    if field.editable and not field.primary_key
) - {"owner", "points_earned"}


class ShiftMutationResult(NamedTuple):
    """Outcome of a create/update/delete"""

    shift: Optional[ShiftEntry]
    shift_id: int
    pay: Optional[PayBreakdown] = None
    leave_delta: LeaveDelta = LeaveDelta()
    rewards: RewardDelta = RewardDelta()
    ledger: Optional[LedgerChange] = None
    ledger_failure: Optional[LedgerUpdateFailure] = None

    @property
    def ledger_ok(self) -> bool:
        return self.ledger_failure is None


def leave_state_of(entry: ShiftEntry) -> LeaveState:
    return LeaveState(entry.entry_type, entry.leave_type or None)


@contextmanager
def store_errors(operation):
    """Turn database failures on the primary record into StoreError"""
    try:
        yield
    except DatabaseError as e:
        logger.error(
            "Shift store failure",
            extra={"operation": operation, "err": err_tag(e)},
            exc_info=True,
        )
        raise StoreError(f"Could not {operation} the shift entry") from e


class ShiftAccountingService:
    """Entry points for every shift mutation"""

    def create_shift(self, user, data: Dict[str, Any]) -> ShiftMutationResult:
        """
        Validate, price and store a new shift entry, then credit the ledger.

        Args:
            user: Owner of the new entry
            data: Entry fields; may carry ``holiday_id`` instead of ``holiday``
                and a qualifying-days label such as "15+"

        Raises:
            ShiftValidationError: fields do not fit the entry type
            NotFoundError: ``holiday_id`` does not exist
            StoreError: the entry could not be saved
        """
        data = self._prepare(data, data.get("entry_type"))
        entry = ShiftEntry(owner=user, **data)
        self._validate(entry)

        pay = None
        if entry.entry_type == EntryType.WORKED.value and entry.job and entry.total_pay is None:
            pay = self._price(entry)
        entry.points_earned = points_for_pay(entry.total_pay)

        leave_delta = reconcile_leave(None, leave_state_of(entry))
        rewards = rewards_for_created_entry(entry.entry_type, entry.points_earned)

        with store_errors("create"):
            with transaction.atomic():
                self._save(entry)
                ledger, failure = self._apply_ledger(
                    user, entry.pk, "create", leave_delta, rewards
                )

        logger.info("Shift created", extra=safe_log_shift(entry, "create"))
        return ShiftMutationResult(
            shift=entry,
            shift_id=entry.pk,
            pay=pay,
            leave_delta=leave_delta,
            rewards=rewards,
            ledger=ledger,
            ledger_failure=failure,
        )

    def update_shift(self, user, shift_id, changes: Dict[str, Any]) -> ShiftMutationResult:
        """
        Apply ``changes`` to one of the user's entries and reconcile leave counters.

        points_earned is never recomputed. A worked entry is repriced when a
        pay input changes and no total_pay is supplied.

        Raises:
            NotFoundError: the entry does not exist or belongs to someone else
            ShiftValidationError: the changed entry does not fit its type
            StoreError: the entry could not be saved
        """
        with store_errors("update"):
            with transaction.atomic():
                entry = self._locked_entry(user, shift_id)
                prior = leave_state_of(entry)
                changes = self._prepare(changes, entry.entry_type)

                new_type = changes.get("entry_type", entry.entry_type)
                if new_type != entry.entry_type:
                    if entry.entry_type == EntryType.WORKED.value:
                        # derived from the worked pay inputs
                        for field in ("rate", "total_pay"):
                            if field not in changes:
                                setattr(entry, field, None)
                    clear_foreign_fields(entry, new_type, keep=changes.keys())
                for field, value in changes.items():
                    setattr(entry, field, value)
                self._validate(entry)

                pay = None
                if self._needs_repricing(entry, changes):
                    pay = self._price(entry)

                self._save(entry)
                leave_delta = reconcile_leave(prior, leave_state_of(entry))
                ledger, failure = self._apply_ledger(
                    user, entry.pk, "update", leave_delta, RewardDelta()
                )

        logger.info("Shift updated", extra=safe_log_shift(entry, "update"))
        return ShiftMutationResult(
            shift=entry,
            shift_id=entry.pk,
            pay=pay,
            leave_delta=leave_delta,
            ledger=ledger,
            ledger_failure=failure,
        )

    def delete_shift(self, user, shift_id) -> ShiftMutationResult:
        """
        Delete one of the user's entries and release the leave day it held.

        XP and points stay credited unless REVERSE_REWARDS_ON_DELETE is set.

        Raises:
            NotFoundError: the entry does not exist or belongs to someone else
            StoreError: the entry could not be deleted
        """
        with store_errors("delete"):
            with transaction.atomic():
                entry = self._locked_entry(user, shift_id)
                prior = leave_state_of(entry)
                deleted_id = entry.pk
                log_extra = safe_log_shift(entry, "delete")

                entry.delete()
                leave_delta = reconcile_leave(prior, None)
                rewards = rewards_reversed_on_delete(entry.entry_type, entry.points_earned)
                ledger, failure = self._apply_ledger(
                    user, deleted_id, "delete", leave_delta, rewards
                )

        logger.info("Shift deleted", extra=log_extra)
        return ShiftMutationResult(
            shift=None,
            shift_id=deleted_id,
            leave_delta=leave_delta,
            rewards=rewards,
            ledger=ledger,
            ledger_failure=failure,
        )

    # Helpers

    def _prepare(self, data: Dict[str, Any], current_type: Optional[str]) -> Dict[str, Any]:
        """
        Check field names, resolve holiday_id and normalize qualifying days; reads only.

        holiday_id is only looked up for stat holiday entries and ignored otherwise.
        """
        data = dict(data)
        data.pop("owner", None)
        data.pop("points_earned", None)

        holiday_id = data.pop("holiday_id", None)
        unknown = sorted(set(data) - WRITABLE_FIELDS)
        if unknown:
            raise ShiftValidationError(
                f"Unknown shift fields: {', '.join(unknown)}",
                details={field: ["Unknown field"] for field in unknown},
            )

        entry_type = data.get("entry_type", current_type)
        if holiday_id is not None and entry_type == EntryType.STAT_HOLIDAY.value:
            name = Holiday.objects.filter(pk=holiday_id).values_list("name", flat=True).first()
            if name is None:
                raise NotFoundError("Holiday", details={"holiday_id": holiday_id})
            data["holiday"] = name

        if "qualifying_days" in data:
            data["qualifying_days"] = normalize_qualifying_days(data["qualifying_days"])

        return data

    def _validate(self, entry: ShiftEntry) -> None:
        try:
            entry.full_clean()
        except DjangoValidationError as e:
            details = e.message_dict if hasattr(e, "error_dict") else {"non_field_errors": e.messages}
            field, messages = next(iter(details.items()))
            raise ShiftValidationError(f"{field}: {messages[0]}", details=details)

    def _save(self, entry: ShiftEntry) -> None:
        try:
            entry.save()
        except DjangoValidationError as e:
            raise ShiftValidationError("Invalid shift entry", details=e.message_dict)

    def _price(self, entry: ShiftEntry) -> PayBreakdown:
        breakdown = calculate_shift_pay(
            {
                "job": entry.job,
                "hours": entry.hours,
                "overtime_hours": entry.overtime_hours,
                "travel_hours": entry.travel_hours,
                "include_meal": entry.meal,
            }
        )
        entry.rate = breakdown["regular_rate"]
        entry.overtime_rate = breakdown["overtime_rate"]
        entry.total_pay = breakdown["total_pay"]
        return breakdown

    def _needs_repricing(self, entry: ShiftEntry, changes: Dict[str, Any]) -> bool:
        if entry.entry_type != EntryType.WORKED.value or not entry.job:
            return False
        if "total_pay" in changes and changes["total_pay"] is not None:
            return False
        if entry.total_pay is None:
            return True
        return any(field in changes for field in PAY_INPUT_FIELDS)

    def _locked_entry(self, user, shift_id) -> ShiftEntry:
        try:
            return ShiftEntry.objects.select_for_update().get(pk=shift_id, owner=user)
        except (ShiftEntry.DoesNotExist, ValueError, TypeError):
            raise NotFoundError("Shift", details={"shift_id": shift_id})

    def _apply_ledger(self, user, shift_id, operation, leave_delta: LeaveDelta, rewards: RewardDelta):
        """Best-effort ledger update in its own savepoint; never raises"""
        if leave_delta.is_zero and rewards.is_zero:
            return None, None

        try:
            with transaction.atomic():
                ledger, _ = UserLedger.objects.select_for_update().get_or_create(user=user)
                change = ledger.apply_changes(
                    sick=leave_delta.sick,
                    personal=leave_delta.personal,
                    xp=rewards.xp,
                    points=rewards.points,
                )
            return change, None
        except Exception as e:
            failure = LedgerUpdateFailure(operation, user.pk, shift_id=shift_id, cause=e)
            logger.warning(
                "Ledger update failed; shift change kept",
                extra={
                    "operation": operation,
                    "shift_id": shift_id,
                    "user_hash": hash_user_id(user.pk),
                    "err": err_tag(e),
                },
                exc_info=True,
            )
            return None, failure

