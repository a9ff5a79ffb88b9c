# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""CLI entry point for decision_generator_compute node.

Draws one or more answers and writes them to stdout.

Usage:
    python -m omnidecision.nodes.node_decision_generator_compute
    python -m omnidecision.nodes.node_decision_generator_compute --count 1000 \\
        --seed 42 --output-format summary
    python -m omnidecision.nodes.node_decision_generator_compute --table table.yaml \\
        --output-format json

Settings fallbacks (overridden by flags):
    DECISION_SEED, DECISION_TABLE_PATH, DECISION_LOG_LEVEL

Exit Codes:
    0 - Success
    1 - Input error: invalid arguments, settings or answer table file
    2 - Compute error: randomness source failure
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import random
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from omnidecision.nodes.node_decision_generator_compute.handlers.exceptions import (
    DecisionGeneratorError,
)
from omnidecision.nodes.node_decision_generator_compute.models.model_answer_table import (
    ModelAnswerTable,
)
from omnidecision.nodes.node_decision_generator_compute.models.model_decision_input import (
    MAX_DECISIONS_PER_REQUEST,
    ModelDecisionInput,
)
from omnidecision.nodes.node_decision_generator_compute.models.model_decision_output import (
    ModelDecisionOutput,
)
from omnidecision.nodes.node_decision_generator_compute.node import (
    NodeDecisionGeneratorCompute,
)
from omnidecision.runtime.enum_log_level import EnumLogLevel
from omnidecision.runtime.logging_config import configure_logging
from omnidecision.runtime.model_decision_settings import DecisionSettings

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="python -m omnidecision.nodes.node_decision_generator_compute",
        description="Ask the decision generator for one or more answers.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One answer
  python -m omnidecision.nodes.node_decision_generator_compute

  # Reproducible batch with tallies
  python -m omnidecision.nodes.node_decision_generator_compute --count 1000 \\
      --seed 42 --output-format summary
""",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=1,
        metavar="INT",
        help=f"Number of answers to draw (1-{MAX_DECISIONS_PER_REQUEST}). Default: 1",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        metavar="INT",
        help="Seed for the randomness source. Default: DECISION_SEED or unseeded",
    )
    parser.add_argument(
        "--table",
        default=None,
        metavar="PATH",
        help="YAML answer table. Default: DECISION_TABLE_PATH or built-in table",
    )
    parser.add_argument(
        "--output-format",
        choices=["text", "json", "summary"],
        default="text",
        help=(
            "Output format: 'text' prints one answer per line, 'json' prints "
            "the full result, 'summary' prints per-answer tallies. Default: text"
        ),
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in EnumLogLevel],
        default=None,
        help="Log level. Default: DECISION_LOG_LEVEL or INFO",
    )
    return parser


def _load_settings() -> DecisionSettings:
    try:
        return DecisionSettings()
    except ValidationError as exc:
        logger.error("Invalid DECISION_* settings: %s", exc)
        print(f"Error: invalid DECISION_* settings: {exc}", file=sys.stderr)
        sys.exit(1)


def _load_table(args: argparse.Namespace, settings: DecisionSettings) -> ModelAnswerTable:
    """Resolve the answer table from --table or settings.

    Raises:
        SystemExit(1): On missing, unreadable or invalid table files.
    """
    try:
        if args.table is not None:
            return ModelAnswerTable.from_yaml(Path(args.table))
        return settings.load_table()
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read answer table: %s", exc)
        print(f"Error: cannot read answer table: {exc}", file=sys.stderr)
        sys.exit(1)
    except yaml.YAMLError as exc:
        logger.error("Invalid YAML in answer table: %s", exc)
        print(f"Error: invalid YAML in answer table: {exc}", file=sys.stderr)
        sys.exit(1)
    except ValidationError as exc:
        logger.error("Invalid answer table: %s", exc)
        print(f"Error: invalid answer table: {exc}", file=sys.stderr)
        sys.exit(1)


def _format_summary(result: ModelDecisionOutput) -> str:
    """Format per-answer tallies as a human-readable summary."""
    total = len(result.draws)
    lines = [
        "Decision Summary",
        "=" * 40,
        f"Draws: {total}",
        "",
    ]
    for answer, count in result.answer_counts.items():
        lines.append(f"  {answer.value:<6} {count:>8}  {100.0 * count / total:6.2f}%")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point for decision_generator_compute.

    Exits with code 0 on success, 1 on input error, 2 on compute failure.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = _load_settings()
    level = EnumLogLevel(args.log_level) if args.log_level else settings.log_level
    configure_logging(level)

    table = _load_table(args, settings)
    seed = args.seed if args.seed is not None else settings.seed

    try:
        input_data = ModelDecisionInput(count=args.count, table=table)
    except ValidationError as exc:
        logger.error("Invalid --count %s: %s", args.count, exc)
        print(f"Error: invalid --count {args.count}: {exc}", file=sys.stderr)
        sys.exit(1)

    node = NodeDecisionGeneratorCompute(source=random.Random(seed), table=table)
    logger.debug("Drawing %d answer(s) (seed=%s)", args.count, seed)

    try:
        result = asyncio.run(node.compute(input_data))
    except DecisionGeneratorError as exc:
        logger.error("Decision failed [%s]: %s", exc.code, exc.message)
        print(f"Error: decision failed: {exc}", file=sys.stderr)
        sys.exit(2)

    if args.output_format == "summary":
        print(_format_summary(result))
    elif args.output_format == "json":
        print(result.model_dump_json(indent=2))
    else:
        for answer in result.answers:
            print(answer.value)


if __name__ == "__main__":
    main()
