# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""OmniDecision - enum-backed answers from weighted random draws.

Quick Start:
    >>> import random
    >>> from omnidecision import EnumAnswer, ask
    >>> answer = ask(random.Random(7))
    >>> answer in EnumAnswer
    True
    >>> from omnidecision import map_draw_to_answer
    >>> map_draw_to_answer(15.0)
    <EnumAnswer.NO: 'NO'>
"""

from omnidecision.enums import EnumAnswer, EnumBike, EnumErrorCode
from omnidecision.nodes.node_decision_generator_compute.handlers import (
    DecisionDrawOutOfRangeError,
    DecisionGeneratorError,
    DecisionRandomSourceError,
    answer_probabilities,
    ask,
    map_draw_to_answer,
)
from omnidecision.nodes.node_decision_generator_compute.models import (
    DEFAULT_ANSWER_TABLE,
    ModelAnswerBand,
    ModelAnswerTable,
)
from omnidecision.nodes.node_decision_generator_compute.node import (
    NodeDecisionGeneratorCompute,
)

__version__ = "0.1.0"

__all__ = [
    # Enums
    "EnumAnswer",
    "EnumBike",
    "EnumErrorCode",
    # Answer table
    "DEFAULT_ANSWER_TABLE",
    "ModelAnswerBand",
    "ModelAnswerTable",
    # Exceptions
    "DecisionDrawOutOfRangeError",
    "DecisionGeneratorError",
    "DecisionRandomSourceError",
    # Main API
    "NodeDecisionGeneratorCompute",
    "answer_probabilities",
    "ask",
    "map_draw_to_answer",
]
