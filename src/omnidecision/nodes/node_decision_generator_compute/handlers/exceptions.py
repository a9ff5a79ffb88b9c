# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for decision generator handlers.

Error Codes:
    - DECISION_001: Draw outside the [0, 100) domain (non-recoverable)
    - DECISION_002: Randomness source failure (fatal, no retry)
"""

from __future__ import annotations


class DecisionGeneratorError(Exception):
    """Base exception for decision generator errors.

    Attributes:
        message: Human-readable error description.
        code: Error code (e.g., DECISION_001).

    Example:
        >>> try:
        ...     raise DecisionGeneratorError("Something failed", code="DECISION_999")
        ... except DecisionGeneratorError as e:
        ...     print(f"Error {e.code}: {e.message}")
        Error DECISION_999: Something failed
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class DecisionDrawOutOfRangeError(DecisionGeneratorError):
    """Raised when a draw falls outside [0, 100) or is NaN.

    Error Code: DECISION_001
    Recoverable: False

    Attributes:
        draw: The rejected draw.
    """

    def __init__(self, draw: float) -> None:
        super().__init__(
            f"Draw {draw!r} is outside the domain [0, 100)", code="DECISION_001"
        )
        self.draw = draw


class DecisionRandomSourceError(DecisionGeneratorError):
    """Raised when the randomness source fails to produce a value.

    Error Code: DECISION_002
    Recoverable: False (no retry policy)
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code="DECISION_002")


__all__ = [
    "DecisionDrawOutOfRangeError",
    "DecisionGeneratorError",
    "DecisionRandomSourceError",
]
