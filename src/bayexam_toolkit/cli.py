"""
Command-line entry point: extract questions from text files into the
JSON dataset loaded by the quiz front-end.

    bayexam-extract 1.txt 2.txt 3.txt -o data/questions.json
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from bayexam_toolkit import __version__
from bayexam_toolkit.core.schemas import ValidationError
from bayexam_toolkit.extractor import (
    ExtractionConfig,
    ExtractionError,
    extract_questions,
    write_dataset,
)
from bayexam_toolkit.extractor.config import BLOCK_START_RULE_NAMES
from bayexam_toolkit.extractor.timing import TimingLog, timed_phase

logger = logging.getLogger("bayexam_toolkit.cli")

DEFAULT_OUTPUT = Path("data") / "questions.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bayexam-extract",
        description="Extract multiple-choice questions from plain-text exam dumps",
    )
    parser.add_argument("inputs", nargs="+", type=Path, help="Text files, processed in the given order")
    parser.add_argument("-o", "--output", type=Path, default=DEFAULT_OUTPUT, help="Output JSON file")
    parser.add_argument(
        "--no-bullets",
        action="store_true",
        help="Do not treat bullet lines as question starts",
    )
    parser.add_argument(
        "--join-leading-text",
        action="store_true",
        help="Keep the start line's text in front of multi-line prompts",
    )
    parser.add_argument("--no-validate", action="store_true", help="Skip dataset schema validation")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail without writing when no input could be read",
    )
    parser.add_argument("--timing-log", type=Path, default=None, help="Merge phase timings into this JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> ExtractionConfig:
    rules = tuple(
        name for name in BLOCK_START_RULE_NAMES
        if not (args.no_bullets and name == "bullet")
    )
    return ExtractionConfig(
        block_start_rules=rules,
        join_leading_text=args.join_leading_text,
        validate_output=not args.no_validate,
        strict=args.strict,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    config = config_from_args(args)
    timing_log = TimingLog()

    try:
        with timed_phase(timing_log, "extraction"):
            result = extract_questions(args.inputs, config=config, timing_log=timing_log)
        with timed_phase(timing_log, "write"):
            write_dataset(result.records, args.output, config=config)
    except ExtractionError as e:
        logger.error(f"Extraction failed: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Dataset failed validation at {e.path or '<root>'}: {e}")
        return 1

    logger.info(f"{result.question_count} questions written to {args.output}")
    logger.debug(timing_log.summary())
    if args.timing_log is not None:
        timing_log.save(args.timing_log)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
