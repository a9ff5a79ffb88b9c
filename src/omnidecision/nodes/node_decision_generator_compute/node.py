# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""NodeDecisionGeneratorCompute - random answer generation.

The node owns one randomness source and one answer table. Each decision
consumes exactly one value from the source and maps it through the
table (see handlers.handler_decision).

Concurrency:
    Draws from the owned source are serialised with a lock, so a single
    node may be shared across threads. The mapping itself is pure.
"""

from __future__ import annotations

import random
import threading
from typing import TYPE_CHECKING

from omnidecision.enums.enum_answer import EnumAnswer
from omnidecision.nodes.node_decision_generator_compute.handlers.handler_decision import (
    ask,
    run_decision,
)
from omnidecision.nodes.node_decision_generator_compute.models.model_answer_table import (
    DEFAULT_ANSWER_TABLE,
    ModelAnswerTable,
)
from omnidecision.nodes.node_decision_generator_compute.models.model_decision_input import (
    ModelDecisionInput,
)
from omnidecision.nodes.node_decision_generator_compute.models.model_decision_output import (
    ModelDecisionOutput,
)
from omnidecision.protocols.protocol_random_source import ProtocolRandomSource

if TYPE_CHECKING:
    from omnidecision.runtime.model_decision_settings import DecisionSettings


class NodeDecisionGeneratorCompute:
    """Pure COMPUTE node producing answers from weighted random draws.

    This node is a thin shell delegating to ask and run_decision.

    Args:
        source: Randomness source. Defaults to a fresh ``random.Random()``.
        table:  Answer table used by ``ask``. Defaults to the built-in table.
    """

    def __init__(
        self,
        source: ProtocolRandomSource | None = None,
        table: ModelAnswerTable | None = None,
    ) -> None:
        self._source: ProtocolRandomSource = (
            source if source is not None else random.Random()
        )
        self._table = table if table is not None else DEFAULT_ANSWER_TABLE
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: DecisionSettings) -> NodeDecisionGeneratorCompute:
        """Build a node with a ``random.Random`` seeded from settings."""
        return cls(source=random.Random(settings.seed), table=settings.load_table())

    @property
    def table(self) -> ModelAnswerTable:
        return self._table

    def ask(self) -> EnumAnswer:
        """Draw one answer using the node's table."""
        with self._lock:
            return ask(self._source, self._table)

    async def compute(self, input_data: ModelDecisionInput) -> ModelDecisionOutput:
        """Draw ``input_data.count`` answers using the request's table."""
        with self._lock:
            return run_decision(input_data, self._source)


__all__ = ["NodeDecisionGeneratorCompute"]
