# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Answer band and answer table models.

An answer table partitions the draw domain [0, 100) into ordered,
half-open bands. Each band names the answer returned for draws inside it.
The same answer may own several disjoint bands.

Default table:
    [0, 15)   -> MAYBE
    [15, 30)  -> NO
    [30, 60)  -> YES
    [60, 75)  -> LATER
    [75, 98)  -> YES
    [98, 100) -> NEVER

SOON owns no band in the default table and is never produced by it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from omnidecision.enums.enum_answer import EnumAnswer

DRAW_LOWER_BOUND = 0.0
DRAW_UPPER_BOUND = 100.0


class ModelAnswerBand(BaseModel):
    """Half-open range [lower, upper) of draws mapped to one answer."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    lower: float = Field(
        ge=DRAW_LOWER_BOUND,
        lt=DRAW_UPPER_BOUND,
        description="Inclusive lower bound of the band.",
    )
    upper: float = Field(
        gt=DRAW_LOWER_BOUND,
        le=DRAW_UPPER_BOUND,
        description="Exclusive upper bound of the band.",
    )
    answer: EnumAnswer = Field(description="Answer returned for draws in this band.")

    @model_validator(mode="after")
    def validate_non_empty(self) -> ModelAnswerBand:
        if self.lower >= self.upper:
            raise ValueError(
                f"Band lower bound {self.lower} must be below upper bound {self.upper}."
            )
        return self

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def contains(self, draw: float) -> bool:
        return self.lower <= draw < self.upper


class ModelAnswerTable(BaseModel):
    """Ordered partition of [0, 100) into answer bands.

    Bands must start at 0, follow each other without gaps or overlaps,
    and end at 100, so that every draw in the domain maps to exactly one
    band.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    bands: tuple[ModelAnswerBand, ...] = Field(
        min_length=1,
        description="Bands in ascending order of their lower bound.",
    )

    @model_validator(mode="after")
    def validate_partition(self) -> ModelAnswerTable:
        first, last = self.bands[0], self.bands[-1]
        if first.lower != DRAW_LOWER_BOUND:
            raise ValueError(
                f"First band must start at {DRAW_LOWER_BOUND}, starts at {first.lower}."
            )
        if last.upper != DRAW_UPPER_BOUND:
            raise ValueError(
                f"Last band must end at {DRAW_UPPER_BOUND}, ends at {last.upper}."
            )
        for previous, current in zip(self.bands, self.bands[1:]):
            if previous.upper != current.lower:
                raise ValueError(
                    f"Bands must be contiguous: [{previous.lower}, {previous.upper}) "
                    f"is followed by [{current.lower}, {current.upper})."
                )
        return self

    @classmethod
    def from_yaml(cls, path: str | Path) -> ModelAnswerTable:
        """Load an answer table from a YAML file.

        Expected layout::

            bands:
              - {lower: 0, upper: 50, answer: "YES"}
              - {lower: 50, upper: 100, answer: "NO"}

        YES and NO must be quoted: YAML 1.1 reads them as booleans.
        An empty file yields the default table.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If YAML parsing fails.
            pydantic.ValidationError: If the bands do not form a valid partition.
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Answer table file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)

        if data is None:
            return DEFAULT_ANSWER_TABLE

        return cls.model_validate(data)


DEFAULT_ANSWER_TABLE = ModelAnswerTable(
    bands=(
        ModelAnswerBand(lower=0.0, upper=15.0, answer=EnumAnswer.MAYBE),
        ModelAnswerBand(lower=15.0, upper=30.0, answer=EnumAnswer.NO),
        ModelAnswerBand(lower=30.0, upper=60.0, answer=EnumAnswer.YES),
        ModelAnswerBand(lower=60.0, upper=75.0, answer=EnumAnswer.LATER),
        ModelAnswerBand(lower=75.0, upper=98.0, answer=EnumAnswer.YES),
        ModelAnswerBand(lower=98.0, upper=100.0, answer=EnumAnswer.NEVER),
    )
)


__all__ = [
    "DEFAULT_ANSWER_TABLE",
    "DRAW_LOWER_BOUND",
    "DRAW_UPPER_BOUND",
    "ModelAnswerBand",
    "ModelAnswerTable",
]
