"""
Helpers that turn users and shift entries into log ``extra`` payloads
without leaking personal data.
"""

import hashlib
from typing import Any, Dict, Union


def hash_user_id(user_id: Union[int, str], salt: str = "shiftlog") -> str:
    """
    Opaque, stable tag for a user id, e.g. ``usr_1a2b3c4d``.

    Lets log lines for the same worker be correlated without exposing
    the primary key.
    """
    if not user_id:
        return "[no_id]"
    digest = hashlib.sha256(f"{salt}:{user_id}".encode()).hexdigest()
    return f"usr_{digest[:8]}"


def safe_log_user(user, action: str = "action") -> Dict[str, Any]:
    if not user:
        return {"action": action, "user": "anonymous"}
    return {
        "action": action,
        "user_hash": hash_user_id(user.pk),
        "is_staff": getattr(user, "is_staff", False),
    }


def safe_log_shift(shift, action: str = "action") -> Dict[str, Any]:
    """
    Log payload for a shift entry mutation.

    Notes, foreman and vessel are free text and are left out.
    """
    if shift is None:
        return {"action": action, "shift": "none"}
    return {
        "action": action,
        "shift_id": shift.pk,
        "user_hash": hash_user_id(shift.owner_id),
        "entry_type": shift.entry_type,
        "leave_type": shift.leave_type or None,
        "date": shift.date.isoformat() if shift.date else None,
    }


def err_tag(exc: BaseException) -> str:
    """Exception class name; the message may carry user data."""
    return type(exc).__name__
