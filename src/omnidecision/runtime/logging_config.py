# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Root logger setup for command-line entry points."""

from __future__ import annotations

import logging

from omnidecision.runtime.enum_log_level import EnumLogLevel

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: EnumLogLevel = EnumLogLevel.INFO) -> None:
    """Configure the root logger once for a CLI process.

    Log records go to stderr so that stdout carries only command output.
    """
    logging.basicConfig(level=level.to_logging_level(), format=LOG_FORMAT, force=True)


__all__ = ["LOG_FORMAT", "configure_logging"]
