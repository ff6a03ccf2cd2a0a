from .accounting import ShiftAccountingService, ShiftMutationResult
from .leave_ledger import LeaveDelta, LeaveState, rebuild_leave_usage, reconcile_leave

__all__ = [
    "LeaveDelta",
    "LeaveState",
    "ShiftAccountingService",
    "ShiftMutationResult",
    "rebuild_leave_usage",
    "reconcile_leave",
]
