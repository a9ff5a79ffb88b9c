# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Input model for DecisionGeneratorCompute node."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnidecision.nodes.node_decision_generator_compute.models.model_answer_table import (
    DEFAULT_ANSWER_TABLE,
    ModelAnswerTable,
)

MAX_DECISIONS_PER_REQUEST = 1_000_000


class ModelDecisionInput(BaseModel):
    """Input to the DecisionGeneratorCompute node."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    count: int = Field(
        default=1,
        ge=1,
        le=MAX_DECISIONS_PER_REQUEST,
        description="Number of independent decisions to draw.",
    )
    table: ModelAnswerTable = Field(
        default=DEFAULT_ANSWER_TABLE,
        description="Answer table mapping draws to answers.",
    )


__all__ = ["MAX_DECISIONS_PER_REQUEST", "ModelDecisionInput"]
