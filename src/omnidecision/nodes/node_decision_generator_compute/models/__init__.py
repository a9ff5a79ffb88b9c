# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for DecisionGeneratorCompute node."""

from omnidecision.nodes.node_decision_generator_compute.models.model_answer_table import (
    DEFAULT_ANSWER_TABLE,
    DRAW_LOWER_BOUND,
    DRAW_UPPER_BOUND,
    ModelAnswerBand,
    ModelAnswerTable,
)
from omnidecision.nodes.node_decision_generator_compute.models.model_decision_input import (
    MAX_DECISIONS_PER_REQUEST,
    ModelDecisionInput,
)
from omnidecision.nodes.node_decision_generator_compute.models.model_decision_output import (
    ModelDecisionDraw,
    ModelDecisionOutput,
)

__all__ = [
    "DEFAULT_ANSWER_TABLE",
    "DRAW_LOWER_BOUND",
    "DRAW_UPPER_BOUND",
    "MAX_DECISIONS_PER_REQUEST",
    "ModelAnswerBand",
    "ModelAnswerTable",
    "ModelDecisionDraw",
    "ModelDecisionInput",
    "ModelDecisionOutput",
]
