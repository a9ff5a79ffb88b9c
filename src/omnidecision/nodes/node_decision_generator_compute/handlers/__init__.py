# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for DecisionGeneratorCompute node."""

from omnidecision.nodes.node_decision_generator_compute.handlers.exceptions import (
    DecisionDrawOutOfRangeError,
    DecisionGeneratorError,
    DecisionRandomSourceError,
)
from omnidecision.nodes.node_decision_generator_compute.handlers.handler_decision import (
    answer_probabilities,
    ask,
    draw_from_source,
    map_draw_to_answer,
    run_decision,
)

__all__ = [
    "DecisionDrawOutOfRangeError",
    "DecisionGeneratorError",
    "DecisionRandomSourceError",
    "answer_probabilities",
    "ask",
    "draw_from_source",
    "map_draw_to_answer",
    "run_decision",
]
