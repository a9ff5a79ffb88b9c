# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Operation status codes."""

from __future__ import annotations

from enum import Enum

# Whether a status ends the operation. Kept outside the class so the enum
# body only declares members.
_TERMINAL_STATUS: dict[str, bool] = {
    "Success": True,
    "Failed": True,
    "Pending": False,
}


class EnumErrorCode(str, Enum):
    """Status code of an operation.

    Attributes:
        SUCCESS: Operation completed.
        FAILED: Operation failed.
        PENDING: Operation has not finished yet.
    """

    SUCCESS = "Success"
    FAILED = "Failed"
    PENDING = "Pending"

    @property
    def is_terminal(self) -> bool:
        return _TERMINAL_STATUS[self.value]

    @classmethod
    def from_name(cls, name: str) -> EnumErrorCode:
        """Resolve a member by its value ("Failed") or member name ("FAILED").

        Raises:
            ValueError: If no member matches ``name``.
        """
        try:
            return cls(name)
        except ValueError:
            pass
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"{name!r} is not a valid {cls.__name__}") from None


__all__ = ["EnumErrorCode"]
