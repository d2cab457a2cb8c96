"""vprintf entry point: run the demo script or a JSON/YAML script file."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import yaml

from vprintf.emitter import FormatError, run_script
from vprintf.examples import build_demo_script
from vprintf.serialization import load_script

logger = logging.getLogger("vprintf")


def _configure_logging(level: str) -> None:
    # Formatted output owns stdout; log records go to stderr.
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vprintf",
        description="Run printf-style emissions and write them to stdout",
    )
    parser.add_argument(
        "script",
        nargs="?",
        help="JSON or YAML emission script (default: built-in demo)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level)

    try:
        script = load_script(args.script) if args.script else build_demo_script()
    except (OSError, ValueError, TypeError, KeyError, yaml.YAMLError) as exc:
        logger.error("Cannot load script %s: %s", args.script, exc)
        return 1

    try:
        count = run_script(script, stream=sys.stdout)
    except (FormatError, TypeError, ValueError) as exc:
        logger.error("Script %r failed: %s", script.name, exc)
        return 1

    logger.info("Wrote %d emission(s) from %r", count, script.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
