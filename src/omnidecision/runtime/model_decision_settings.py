# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Decision generator settings loaded from the environment.

Environment variables:
    DECISION_SEED: int seed for the node's randomness source (default: unseeded)
    DECISION_TABLE_PATH: YAML answer table file (default: built-in table)
    DECISION_LOG_LEVEL: DEBUG | INFO | WARNING | ERROR | CRITICAL (default INFO)
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from omnidecision.nodes.node_decision_generator_compute.models.model_answer_table import (
    DEFAULT_ANSWER_TABLE,
    ModelAnswerTable,
)
from omnidecision.runtime.enum_log_level import EnumLogLevel


class DecisionSettings(BaseSettings):
    """Pydantic Settings for the decision generator."""

    model_config = SettingsConfigDict(
        env_prefix="DECISION_",
        extra="ignore",
    )

    seed: int | None = Field(
        default=None,
        description="Seed for the randomness source. None draws from OS entropy.",
    )
    table_path: Path | None = Field(
        default=None,
        description="YAML file with a custom answer table.",
    )
    log_level: EnumLogLevel = Field(
        default=EnumLogLevel.INFO,
        description="Root log level for CLI runs.",
    )

    def load_table(self) -> ModelAnswerTable:
        """Return the configured answer table, or the default one."""
        if self.table_path is None:
            return DEFAULT_ANSWER_TABLE
        return ModelAnswerTable.from_yaml(self.table_path)


__all__ = ["DecisionSettings"]
