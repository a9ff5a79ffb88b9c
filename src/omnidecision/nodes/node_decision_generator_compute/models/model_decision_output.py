# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Output models for DecisionGeneratorCompute node."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnidecision.enums.enum_answer import EnumAnswer


class ModelDecisionDraw(BaseModel):
    """A single draw and the answer it mapped to."""

    model_config = ConfigDict(frozen=True)

    draw: float = Field(ge=0.0, lt=100.0, description="Sampled value in [0, 100).")
    answer: EnumAnswer = Field(description="Answer selected by the draw.")


class ModelDecisionOutput(BaseModel):
    """Output from the DecisionGeneratorCompute node."""

    model_config = ConfigDict(frozen=True)

    draws: tuple[ModelDecisionDraw, ...] = Field(
        min_length=1,
        description="One entry per decision, in draw order.",
    )
    answer_counts: dict[EnumAnswer, int] = Field(
        description="Number of draws per answer. Every answer is present, possibly with 0.",
    )

    @property
    def answer(self) -> EnumAnswer:
        """Answer of the first draw."""
        return self.draws[0].answer

    @property
    def answers(self) -> tuple[EnumAnswer, ...]:
        return tuple(d.answer for d in self.draws)


__all__ = ["ModelDecisionDraw", "ModelDecisionOutput"]
