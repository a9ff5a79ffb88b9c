# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Runtime configuration: settings and logging setup."""

from omnidecision.runtime.enum_log_level import EnumLogLevel
from omnidecision.runtime.logging_config import LOG_FORMAT, configure_logging
from omnidecision.runtime.model_decision_settings import DecisionSettings

__all__ = [
    "LOG_FORMAT",
    "DecisionSettings",
    "EnumLogLevel",
    "configure_logging",
]
