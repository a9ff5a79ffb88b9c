# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Bike catalog enum with a per-member price payload.

Prices are in EUR and live in a module-level table keyed by member value,
the same way ordered weights are attached to other enums in this package.

Example:
    >>> from omnidecision.enums import EnumBike
    >>> EnumBike.CUBE.price
    2000
"""

from __future__ import annotations

from enum import Enum

_BIKE_PRICES_EUR: dict[str, int] = {
    "Cube": 2000,
    "Bianche": 3500,
    "Sensa": 1500,
}


class EnumBike(str, Enum):
    """Bikes available in the catalog."""

    CUBE = "Cube"
    BIANCHE = "Bianche"
    SENSA = "Sensa"

    @property
    def price(self) -> int:
        """Price of this bike in EUR."""
        return _BIKE_PRICES_EUR[self.value]

    @classmethod
    def price_list(cls) -> dict[EnumBike, int]:
        """Return every bike with its price, in declaration order."""
        return {bike: bike.price for bike in cls}


__all__ = ["EnumBike"]
