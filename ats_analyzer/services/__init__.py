from .ats_service import (
    CATEGORY_ORDER,
    InvalidInputError,
    analyze,
    calculate_total_score,
    category_weights,
    coerce_resume,
    run_keyword_gap,
)

__all__ = [
    "CATEGORY_ORDER",
    "InvalidInputError",
    "analyze",
    "calculate_total_score",
    "category_weights",
    "coerce_resume",
    "run_keyword_gap",
]
