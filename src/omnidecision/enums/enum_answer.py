# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Answer enum for the decision generator.

The declaration order is significant: ``ordinal`` reports each member's
zero-based position in it.

Example:
    >>> from omnidecision.enums import EnumAnswer
    >>> EnumAnswer.MAYBE.ordinal
    2
    >>> EnumAnswer("YES") is EnumAnswer.YES
    True
"""

from enum import Enum


class EnumAnswer(str, Enum):
    """Closed set of answers the decision generator can return.

    Attributes:
        NO: Negative answer.
        YES: Positive answer.
        MAYBE: Undecided answer.
        LATER: Deferred answer.
        SOON: Near-term answer. Declared but not produced by the default
            answer table.
        NEVER: Definitive negative answer.
    """

    NO = "NO"
    YES = "YES"
    MAYBE = "MAYBE"
    LATER = "LATER"
    SOON = "SOON"
    NEVER = "NEVER"

    @property
    def ordinal(self) -> int:
        return list(type(self)).index(self)

    def __str__(self) -> str:
        return self.value


__all__ = ["EnumAnswer"]
