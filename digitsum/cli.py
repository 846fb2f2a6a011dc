"""
digitsum CLI - Classify buffers, explore the input space, count outcomes.
"""

import argparse
import dataclasses
import sys
from typing import List, Optional

from .core.classifier import PathKind
from .exploration import (
    ExplorationConfig,
    Explorer,
    ReportGenerator,
    STRATEGIES,
    census,
    describe_paths,
    format_summary,
    load_config,
)
from .harness.entrypoint import run_traced
from .infrastructure.logging import get_logger, setup_logging
from .symbolic.providers import ConcreteInputProvider

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="digitsum",
        description="Digit-sum classifier and exhaustive-input harness",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Classify one input through the entry point
  digitsum classify 99999999

  # Classify raw bytes given as hex
  digitsum classify --hex 394139

  # Explore every prefix of up to 4 bytes over the default alphabet
  digitsum explore --max-length 4 --output ./explore_results

  # Explore with a config file (YAML or JSON) or an inline JSON object
  digitsum explore config.yaml
  digitsum explore '{"strategy": "random", "max_inputs": 50000}'

  # Exact outcome counts over all 256**10 buffers
  digitsum census
""",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    classify_parser = subparsers.add_parser("classify", help="Classify a single input")
    classify_parser.add_argument("text", help="Buffer content (latin-1 text, or hex with --hex)")
    classify_parser.add_argument("--hex", action="store_true", help="Interpret TEXT as hex bytes")
    classify_parser.add_argument("--signed", action="store_true", help="Read bytes as signed chars")

    explore_parser = subparsers.add_parser("explore", help="Run the explorer")
    explore_parser.add_argument(
        "config",
        nargs="?",
        help="Path to a .yaml/.yml/.json config, or an inline JSON object",
    )
    explore_parser.add_argument("--strategy", choices=STRATEGIES, help="Enumeration strategy")
    explore_parser.add_argument("--max-length", type=int, help="Longest prefix to enumerate (0-10)")
    explore_parser.add_argument("--alphabet", help="Bytes to place before the terminator")
    explore_parser.add_argument("--max-inputs", type=int, help="Input budget")
    explore_parser.add_argument("--timeout", type=float, help="Timeout in seconds")
    explore_parser.add_argument("--seed", type=int, help="Seed for the random strategy")
    explore_parser.add_argument("--signed", action="store_true", default=None, help="Read bytes as signed chars")
    explore_parser.add_argument("--output", help="Directory for JSON/Markdown reports")

    census_parser = subparsers.add_parser("census", help="Exact outcome counts")
    census_parser.add_argument("--max-length", type=int, default=10, help="Free slots (default: 10)")
    census_parser.add_argument("--signed", action="store_true", help="Read bytes as signed chars")

    paths_parser = subparsers.add_parser("paths", help="Print path conditions")
    paths_parser.add_argument("--signed", action="store_true", help="Read bytes as signed chars")

    return parser


def _decode_input(text: str, as_hex: bool) -> bytes:
    if as_hex:
        return bytes.fromhex(text)
    return text.encode("latin-1")


def cmd_classify(args) -> int:
    try:
        assignment = _decode_input(args.text, args.hex)
    except (ValueError, UnicodeEncodeError) as e:
        logger.error(f"Unable to decode input {args.text!r}: {e}")
        return 2

    run = run_traced(ConcreteInputProvider(assignment), signed=args.signed)
    trace = run.classification
    print(f"Buffer: {run.buffer.hex()}")
    print(f"Path: {trace.path.value}")
    print(f"Digit sum: {trace.total if trace.total is not None else '-'}")
    print(f"Greater than 42: {trace.result}")
    print(f"Exit code: {run.exit_code}")
    return run.exit_code


def _explore_config(args) -> ExplorationConfig:
    config = load_config(args.config) if args.config else ExplorationConfig()
    overrides = {
        "strategy": args.strategy,
        "max_length": args.max_length,
        "alphabet": args.alphabet,
        "max_inputs": args.max_inputs,
        "timeout_seconds": args.timeout,
        "seed": args.seed,
        "signed": args.signed,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    return dataclasses.replace(config, **overrides) if overrides else config


def cmd_explore(args) -> int:
    try:
        config = _explore_config(args)
    except (OSError, ValueError) as e:
        logger.error(f"Invalid exploration config: {e}")
        return 2

    result = Explorer(config).explore()

    if args.output:
        paths = ReportGenerator(args.output).generate_all(result)
        logger.info(f"JSON report: {paths['json']}")
        logger.info(f"Markdown report: {paths['markdown']}")

    print("\n" + format_summary(result))
    return 0 if result.passed else 1


def cmd_census(args) -> int:
    try:
        result = census(max_length=args.max_length, signed=args.signed)
    except ValueError as e:
        logger.error(str(e))
        return 2

    print(f"Assignments: {result.total} (256**{result.max_length})")
    for kind in PathKind:
        print(f"  {kind.value:<24}{result.counts[kind]}")
    print(f"Flagged (exit 0): {result.flagged}")
    print(f"Fraction above 42: {result.fraction_above:.6f}")
    return 0


def cmd_paths(args) -> int:
    for condition in describe_paths(signed=args.signed):
        print(f"{condition.path.value} (exit {condition.exit_code}): {condition.render()}")
    return 0


COMMANDS = {
    "classify": cmd_classify,
    "explore": cmd_explore,
    "census": cmd_census,
    "paths": cmd_paths,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the digitsum CLI."""
    args = build_parser().parse_args(argv)
    try:
        setup_logging(args.log_level)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
