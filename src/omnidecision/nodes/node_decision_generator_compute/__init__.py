# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""DecisionGeneratorCompute node package."""

from omnidecision.nodes.node_decision_generator_compute.node import (
    NodeDecisionGeneratorCompute,
)

__all__ = ["NodeDecisionGeneratorCompute"]
