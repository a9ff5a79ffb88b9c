# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Decision Enums Package.

Unified import location for all enums:

    from omnidecision.enums import EnumAnswer, EnumBike, EnumErrorCode

Exports:
    - EnumAnswer: Answers returned by the decision generator
    - EnumErrorCode: Operation status codes (SUCCESS, FAILED, PENDING)
    - EnumBike: Bike catalog with per-member EUR prices
"""

from omnidecision.enums.enum_answer import EnumAnswer
from omnidecision.enums.enum_bike import EnumBike
from omnidecision.enums.enum_error_code import EnumErrorCode

__all__ = [
    "EnumAnswer",
    "EnumBike",
    "EnumErrorCode",
]
