"""Analysis error types."""

from __future__ import annotations

from enum import Enum


class AnalysisErrorCode(Enum):
    """Error classification codes."""

    INVALID_RANGE = "invalid_range"
    SECURITY_MISMATCH = "security_mismatch"
    NOT_FOUND = "not_found"
    ARITHMETIC_DEGENERATE = "arithmetic_degenerate"
    NO_DATA = "no_data"
    VALIDATION_FAILED = "validation_failed"


class AnalysisError(Exception):
    """Analysis exception carrying a structured error code.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
    """

    def __init__(
        self,
        message: str,
        code: AnalysisErrorCode = AnalysisErrorCode.VALIDATION_FAILED,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
