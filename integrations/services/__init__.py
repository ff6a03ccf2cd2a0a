from .holiday_qualification import (
    QUALIFYING_DAYS_REQUIRED,
    QualificationResult,
    evaluate_holiday_qualification,
    qualification_for_user,
    qualifying_window,
)

__all__ = [
    "QUALIFYING_DAYS_REQUIRED",
    "QualificationResult",
    "evaluate_holiday_qualification",
    "qualification_for_user",
    "qualifying_window",
]
