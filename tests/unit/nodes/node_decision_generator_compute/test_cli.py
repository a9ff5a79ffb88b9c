# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Tests for the decision_generator_compute command-line entry point."""

from __future__ import annotations

import json
import logging
import random
from pathlib import Path

import pytest

from omnidecision.enums.enum_answer import EnumAnswer
from omnidecision.nodes.node_decision_generator_compute import __main__ as cli_module
from omnidecision.nodes.node_decision_generator_compute.__main__ import main

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _isolated_cli(monkeypatch: pytest.MonkeyPatch):
    for name in ("DECISION_SEED", "DECISION_TABLE_PATH", "DECISION_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, list(root.handlers)
    yield
    root.handlers[:] = previous_handlers
    root.setLevel(previous_level)


class TestCliOutput:
    def test_text_prints_one_answer(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--seed", "7"])
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        assert EnumAnswer(lines[0]) in set(EnumAnswer)

    def test_text_prints_count_answers(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--seed", "7", "--count", "25"])
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 25
        assert EnumAnswer.SOON.value not in lines

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--seed", "3", "--count", "10", "--output-format", "json"])
        payload = json.loads(capsys.readouterr().out)
        assert len(payload["draws"]) == 10
        assert sum(payload["answer_counts"].values()) == 10
        assert set(payload["answer_counts"]) == {a.value for a in EnumAnswer}

    def test_summary_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--seed", "3", "--count", "200", "--output-format", "summary"])
        out = capsys.readouterr().out
        assert "Draws: 200" in out
        for answer in EnumAnswer:
            assert answer.value in out

    def test_same_seed_same_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--seed", "42", "--count", "30"])
        first = capsys.readouterr().out
        main(["--seed", "42", "--count", "30"])
        assert capsys.readouterr().out == first

    def test_seed_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["--seed", "9", "--count", "15"])
        explicit = capsys.readouterr().out
        monkeypatch.setenv("DECISION_SEED", "9")
        main(["--count", "15"])
        assert capsys.readouterr().out == explicit

    def test_custom_table(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "soon.yaml"
        path.write_text(
            "bands:\n  - {lower: 0, upper: 100, answer: SOON}\n", encoding="utf-8"
        )
        main(["--table", str(path), "--count", "3"])
        assert capsys.readouterr().out.splitlines() == ["SOON"] * 3


class TestCliErrors:
    def test_missing_table_exits_1(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--table", str(tmp_path / "missing.yaml")])
        assert exc_info.value.code == 1

    def test_invalid_table_exits_1(self, tmp_path: Path) -> None:
        path = tmp_path / "gap.yaml"
        path.write_text(
            "bands:\n"
            "  - {lower: 0, upper: 40, answer: 'YES'}\n"
            "  - {lower: 50, upper: 100, answer: 'NO'}\n",
            encoding="utf-8",
        )
        with pytest.raises(SystemExit) as exc_info:
            main(["--table", str(path)])
        assert exc_info.value.code == 1

    def test_malformed_yaml_exits_1(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("bands: [\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["--table", str(path)])
        assert exc_info.value.code == 1

    def test_directory_table_exits_1(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--table", str(tmp_path)])
        assert exc_info.value.code == 1

    def test_non_utf8_table_exits_1(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.yaml"
        path.write_bytes(b"bands: \xff\xfe\n")
        with pytest.raises(SystemExit) as exc_info:
            main(["--table", str(path)])
        assert exc_info.value.code == 1

    def test_table_path_from_environment_is_checked(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("DECISION_TABLE_PATH", str(tmp_path))
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1

    @pytest.mark.parametrize(
        "argv,message",
        [
            (["--count", "0"], "Invalid --count"),
            (["--table", "/nonexistent/table.yaml"], "Cannot read answer table"),
        ],
    )
    def test_input_errors_are_logged(
        self,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
        argv: list[str],
        message: str,
    ) -> None:
        monkeypatch.setattr(cli_module, "configure_logging", lambda level: None)
        caplog.set_level(logging.ERROR)
        with pytest.raises(SystemExit):
            main(argv)
        assert any(
            r.levelno == logging.ERROR and message in r.getMessage()
            for r in caplog.records
        )

    def test_zero_count_exits_1(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--count", "0"])
        assert exc_info.value.code == 1

    def test_source_failure_exits_2(
        self, monkeypatch: pytest.MonkeyPatch, failing_source
    ) -> None:
        monkeypatch.setattr(random, "Random", lambda seed=None: failing_source)
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2
