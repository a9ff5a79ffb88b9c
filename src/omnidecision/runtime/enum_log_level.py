# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Log level enum for runtime configuration."""

from __future__ import annotations

import logging
from enum import StrEnum


class EnumLogLevel(StrEnum):
    """Log level accepted by settings and the CLI."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Return the matching ``logging`` module level number."""
        return logging.getLevelNamesMapping()[self.value]


__all__ = ["EnumLogLevel"]
