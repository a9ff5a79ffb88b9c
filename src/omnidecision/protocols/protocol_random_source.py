# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Protocol for uniform randomness sources."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolRandomSource(Protocol):
    """Source of uniformly distributed floats in [0.0, 1.0).

    ``random.Random`` and ``random.SystemRandom`` satisfy this protocol.
    Implementations are not required to be thread-safe; callers sharing a
    source across threads must synchronise access.
    """

    def random(self) -> float:
        """Return the next float in [0.0, 1.0)."""
        ...


__all__ = ["ProtocolRandomSource"]
