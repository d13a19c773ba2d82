"""Column alignment detection for formatted numeric tables."""
from .alignment import (
    ADDITIONAL_NUMERIC,
    BLANK_PATTERN,
    NUMERIC_PATTERN,
    alignment,
    classify_alignment,
    compile_numeric_pattern,
    representative_value,
    right_align,
)
from .errors import AlignmentError, InvalidInputKind, PatternCompilationError

__all__ = [
    "ADDITIONAL_NUMERIC",
    "BLANK_PATTERN",
    "NUMERIC_PATTERN",
    "AlignmentError",
    "InvalidInputKind",
    "PatternCompilationError",
    "alignment",
    "classify_alignment",
    "compile_numeric_pattern",
    "representative_value",
    "right_align",
]
