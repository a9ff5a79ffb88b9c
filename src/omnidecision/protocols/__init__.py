# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Shared protocol definitions for omnidecision handlers.

Handlers receive their randomness source explicitly instead of reaching
for a module-level generator, so tests can inject seeded or scripted
sources.
"""

from omnidecision.protocols.protocol_random_source import ProtocolRandomSource

__all__ = ["ProtocolRandomSource"]
