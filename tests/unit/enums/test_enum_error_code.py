# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for EnumErrorCode."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.unit

from omnidecision.enums import EnumErrorCode


class TestEnumErrorCode:
    def test_members_in_declaration_order(self) -> None:
        assert list(EnumErrorCode) == [
            EnumErrorCode.SUCCESS,
            EnumErrorCode.FAILED,
            EnumErrorCode.PENDING,
        ]

    def test_equality_is_identity(self) -> None:
        code = EnumErrorCode.FAILED
        assert code == EnumErrorCode.FAILED
        assert code != EnumErrorCode.SUCCESS

    @pytest.mark.parametrize("name", ["Failed", "FAILED"])
    def test_from_name_accepts_value_or_member_name(self, name: str) -> None:
        assert EnumErrorCode.from_name(name) is EnumErrorCode.FAILED

    def test_from_name_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="not a valid EnumErrorCode"):
            EnumErrorCode.from_name("Crashed")

    def test_every_member_has_terminal_flag(self) -> None:
        for code in EnumErrorCode:
            assert isinstance(code.is_terminal, bool)

    def test_terminal_flags(self) -> None:
        assert EnumErrorCode.SUCCESS.is_terminal
        assert EnumErrorCode.FAILED.is_terminal
        assert not EnumErrorCode.PENDING.is_terminal
