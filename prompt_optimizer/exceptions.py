"""
Exception classes for the prompt optimizer.

Predictable conditions (blank text given to optimize) are reported as
result variants; these exceptions cover caller contract violations and
are translated to API error responses by the backend.
"""
from __future__ import annotations

from typing import Optional, Dict, Any


class PromptOptimizerError(Exception):
    """Base exception class for all optimizer errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class InvalidInputError(PromptOptimizerError):
    """Raised when blank text reaches the synthesizer."""

    def __init__(self, message: str = "Prompt text is empty", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code="INVALID_INPUT",
            status_code=400,
            details=details or {},
        )


class StaleAnalysisError(PromptOptimizerError):
    """Raised when an AnalysisRecord does not belong to the text being optimized."""

    def __init__(
        self,
        message: str = "Analysis does not match the current prompt text",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code="STALE_ANALYSIS",
            status_code=409,
            details=details or {},
        )


class OptimizationInProgressError(PromptOptimizerError):
    """Raised when a session already has an optimize call pending."""

    def __init__(self, session_id: str):
        super().__init__(
            message=f"An optimization is already running for session '{session_id}'",
            error_code="OPTIMIZATION_IN_PROGRESS",
            status_code=409,
            details={"session_id": session_id},
        )
