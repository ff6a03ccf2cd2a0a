# core/tests/test_logging_filters.py
import logging
from io import StringIO

from core.logging_utils import err_tag, hash_user_id, safe_log_shift
from shiftlog.logging_filters import PIIRedactorFilter


def _isolated_logger(name):
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setLevel(logging.INFO)
    handler.addFilter(PIIRedactorFilter())
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.handlers = []  # isolate from global handlers
    logger.propagate = False  # don't bubble to root
    logger.addHandler(handler)
    return logger, stream


def test_email_and_token_are_redacted_stream():
    logger, stream = _isolated_logger("test.pii")

    logger.info(
        "email=%s token=%s", "john.doe@example.com", "Token 9944b09199c62bcf9418ad846dd0e4bbdfc6ee4b"
    )

    value = stream.getvalue()
    assert "***@example.com" in value
    assert "****" in value
    assert "john.doe@example.com" not in value
    assert "9944b09199c62bcf9418ad846dd0e4bbdfc6ee4b" not in value


def test_free_text_shift_fields_are_redacted_in_mappings():
    logger, stream = _isolated_logger("test.pii.mapping")

    logger.info("shift %(foreman)s %(notes)s %(job)s", {"foreman": "Bob Smith", "notes": "sore back", "job": "Labour"})

    value = stream.getvalue()
    assert "Bob Smith" not in value
    assert "sore back" not in value
    assert "Labour" in value


def test_hash_user_id_is_stable_and_opaque():
    assert hash_user_id(42) == hash_user_id(42)
    assert hash_user_id(42) != hash_user_id(43)
    assert hash_user_id(42).startswith("usr_")
    assert len(hash_user_id(42)) == 12
    assert hash_user_id(None) == "[no_id]"


def test_safe_log_shift_omits_free_text():
    class Shift:
        pk = 5
        owner_id = 42
        entry_type = "leave"
        leave_type = "sick_leave"
        date = None
        notes = "private"

    data = safe_log_shift(Shift(), "create")
    assert data["shift_id"] == 5
    assert data["user_hash"] == hash_user_id(42)
    assert "notes" not in data
    assert safe_log_shift(None)["shift"] == "none"


def test_err_tag_uses_class_name_only():
    assert err_tag(ValueError("secret detail")) == "ValueError"
