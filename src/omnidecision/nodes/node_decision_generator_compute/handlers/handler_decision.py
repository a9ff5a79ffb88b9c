# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Decision generator handler - pure functions.

Core logic:

1. Draw a uniform value in [0, 100) from an injected randomness source.
   Exactly one call to ``source.random()`` per decision.

2. Map the draw to an answer by scanning the answer table's bands in
   order. The first band whose [lower, upper) range contains the draw
   wins.

With the default table the effective answer probabilities are:
    MAYBE 15%, NO 15%, YES 53% (30 + 23), LATER 15%, NEVER 2%, SOON 0%.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections import Counter

from omnidecision.enums.enum_answer import EnumAnswer
from omnidecision.nodes.node_decision_generator_compute.handlers.exceptions import (
    DecisionDrawOutOfRangeError,
    DecisionRandomSourceError,
)
from omnidecision.nodes.node_decision_generator_compute.models.model_answer_table import (
    DEFAULT_ANSWER_TABLE,
    DRAW_LOWER_BOUND,
    DRAW_UPPER_BOUND,
    ModelAnswerTable,
)
from omnidecision.nodes.node_decision_generator_compute.models.model_decision_input import (
    ModelDecisionInput,
)
from omnidecision.nodes.node_decision_generator_compute.models.model_decision_output import (
    ModelDecisionDraw,
    ModelDecisionOutput,
)
from omnidecision.protocols.protocol_random_source import ProtocolRandomSource

logger = logging.getLogger(__name__)


def draw_from_source(source: ProtocolRandomSource) -> float:
    """Draw one value in [0, 100) from ``source``.

    Raises:
        DecisionRandomSourceError: If the source raises or returns a
            non-numeric value.
    """
    try:
        fraction = source.random()
    except Exception as exc:
        raise DecisionRandomSourceError(
            f"Randomness source {type(source).__name__} failed: {exc}"
        ) from exc
    if isinstance(fraction, bool) or not isinstance(fraction, numbers.Real):
        raise DecisionRandomSourceError(
            f"Randomness source {type(source).__name__} returned {fraction!r}, "
            "expected a float in [0.0, 1.0)"
        )
    return DRAW_UPPER_BOUND * float(fraction)


def map_draw_to_answer(
    draw: float,
    table: ModelAnswerTable = DEFAULT_ANSWER_TABLE,
) -> EnumAnswer:
    """Map a draw to the answer of the first band containing it.

    Args:
        draw:  Value in [0, 100).
        table: Answer table to scan.

    Returns:
        The answer owning the band that contains ``draw``.

    Raises:
        DecisionDrawOutOfRangeError: If ``draw`` is NaN or outside [0, 100).
    """
    if math.isnan(draw) or not DRAW_LOWER_BOUND <= draw < DRAW_UPPER_BOUND:
        raise DecisionDrawOutOfRangeError(draw)

    for band in table.bands:
        if band.contains(draw):
            return band.answer

    # Unreachable: ModelAnswerTable validates full coverage of [0, 100)
    raise DecisionDrawOutOfRangeError(draw)


def ask(
    source: ProtocolRandomSource,
    table: ModelAnswerTable = DEFAULT_ANSWER_TABLE,
) -> EnumAnswer:
    """Draw once from ``source`` and return the mapped answer."""
    return map_draw_to_answer(draw_from_source(source), table)


def answer_probabilities(
    table: ModelAnswerTable = DEFAULT_ANSWER_TABLE,
) -> dict[EnumAnswer, float]:
    """Return the effective probability of each answer under ``table``.

    Answers owning several bands get the sum of their widths. Answers
    owning no band are present with probability 0.0.
    """
    span = DRAW_UPPER_BOUND - DRAW_LOWER_BOUND
    probabilities = dict.fromkeys(EnumAnswer, 0.0)
    for band in table.bands:
        probabilities[band.answer] += band.width / span
    return probabilities


def run_decision(
    input_data: ModelDecisionInput,
    source: ProtocolRandomSource,
) -> ModelDecisionOutput:
    """Draw ``input_data.count`` independent decisions.

    Args:
        input_data: Decision request with count and answer table.
        source:     Randomness source, consumed once per decision.

    Returns:
        ModelDecisionOutput with every draw and per-answer tallies.
    """
    draws: list[ModelDecisionDraw] = []
    for _ in range(input_data.count):
        draw = draw_from_source(source)
        answer = map_draw_to_answer(draw, input_data.table)
        draws.append(ModelDecisionDraw(draw=draw, answer=answer))

    tally = Counter(d.answer for d in draws)
    answer_counts = {answer: tally.get(answer, 0) for answer in EnumAnswer}

    logger.debug(
        "Drew %d decisions: %s",
        len(draws),
        ", ".join(f"{a.value}={n}" for a, n in answer_counts.items() if n),
    )

    return ModelDecisionOutput(draws=tuple(draws), answer_counts=answer_counts)


__all__ = [
    "answer_probabilities",
    "ask",
    "draw_from_source",
    "map_draw_to_answer",
    "run_decision",
]
