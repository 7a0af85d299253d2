"""
Module: extractor.pipeline

Purpose:
    Main pipeline orchestrator for text question extraction. Loads each
    source, segments it into blocks, parses every block and assigns ids
    to the records that pass the output filter.

Key Functions:
    - load_document(): Read and normalize one source file
    - extract_document(): Parse one document into records
    - extract_questions(): Main entry point over many sources
    - write_dataset(): Serialize and write the dataset

Key Classes:
    - ExtractionResult: Container for extraction output
    - ExtractionError: Raised in strict mode when nothing could be read

Dependencies:
    - bayexam_toolkit.extractor.detection: Line recognizers
    - bayexam_toolkit.extractor.structuring: Segmenter and block parser
    - portalocker (via file_locking): Locked dataset writes

Used By:
    - bayexam_toolkit.cli: Command-line extraction
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from bayexam_toolkit.core.models import QuestionRecord, RawDocument
from bayexam_toolkit.core.utils.serialization import dumps_dataset

from .config import ExtractionConfig
from .detection.starts import select_rules
from .file_locking import locked_write_text
from .structuring.block_parser import parse_block
from .structuring.segmenter import segment_blocks
from .timing import TimingLog, timed_phase

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Raised when extraction cannot produce a dataset."""
    pass


@dataclass
class ExtractionResult:
    """
    Result of extracting a set of sources.

    Attributes:
        records: Emitted records in id order
        sources_read: Labels of sources that were parsed
        sources_skipped: Paths of sources that could not be read
        warnings: Warning messages, one per skipped source
    """
    records: List[QuestionRecord] = field(default_factory=list)
    sources_read: List[str] = field(default_factory=list)
    sources_skipped: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def question_count(self) -> int:
        return len(self.records)


def load_document(path: Path, *, encoding: str = "utf-8") -> RawDocument:
    """
    Read a text file into a RawDocument labeled with the file name.

    Raises:
        FileNotFoundError: If path doesn't exist or is not a file
        UnicodeDecodeError: If the file is not valid in ``encoding``
    """
    if not path.is_file():
        raise FileNotFoundError(f"Source not found: {path}")
    with open(path, "r", encoding=encoding, newline="") as f:
        return RawDocument.from_text(path.name, f.read())


def extract_document(
    document: RawDocument,
    ids: Iterator[int],
    *,
    config: Optional[ExtractionConfig] = None,
    timing_log: Optional[TimingLog] = None,
) -> List[QuestionRecord]:
    """
    Parse one document into records.

    Ids are drawn from ``ids`` only for records that pass the filter
    (non-empty question and answer text), so ids stay contiguous.

    Args:
        document: Source document
        ids: Shared id sequence for the whole run
        config: Extraction configuration
        timing_log: Optional timing collector

    Returns:
        Records in block order
    """
    config = config or ExtractionConfig()
    timing_log = timing_log if timing_log is not None else TimingLog()
    rules = select_rules(config.block_start_rules)

    with timed_phase(timing_log, "segmentation", source=document.source):
        blocks = segment_blocks(document, rules)

    records: List[QuestionRecord] = []
    with timed_phase(timing_log, "parsing", source=document.source):
        for block in blocks:
            parsed = parse_block(
                block,
                start_rules=rules,
                join_leading_text=config.join_leading_text,
            )
            if not parsed.is_emittable:
                logger.debug(
                    f"Dropped block {block.number} in {document.source}: "
                    f"{'no question text' if not parsed.question else 'no answer'}"
                )
                continue
            records.append(QuestionRecord(
                id=next(ids),
                source=document.source,
                number=parsed.number,
                question=parsed.question,
                options=parsed.options,
                answer=parsed.answer,
                explanation=parsed.explanation,
            ))

    logger.debug(f"{document.source}: {len(records)} of {len(blocks)} blocks emitted")
    return records


def extract_questions(
    paths: Iterable[Path],
    *,
    config: Optional[ExtractionConfig] = None,
    ids: Optional[Iterator[int]] = None,
    timing_log: Optional[TimingLog] = None,
) -> ExtractionResult:
    """
    Extract questions from text sources, in the order given.

    Missing or undecodable sources are logged as warnings and skipped;
    the remaining sources are still processed.

    Args:
        paths: Source files in processing order
        config: Optional extraction configuration
        ids: Id sequence; defaults to 1, 2, 3, ...
        timing_log: Optional timing collector

    Returns:
        ExtractionResult with records and skipped sources

    Raises:
        ExtractionError: If config.strict and no source could be read

    Example:
        >>> result = extract_questions([Path("1.txt"), Path("2.txt")])
        >>> print(f"Extracted {result.question_count} questions")
        Extracted 212 questions
    """
    config = config or ExtractionConfig()
    ids = ids if ids is not None else itertools.count(1)
    result = ExtractionResult()

    for path in paths:
        try:
            document = load_document(Path(path), encoding=config.encoding)
        except FileNotFoundError:
            message = f"Source not found, skipping: {path}"
        except UnicodeDecodeError as e:
            message = f"Source is not valid {config.encoding}, skipping: {path} ({e.reason})"
        else:
            result.records.extend(
                extract_document(document, ids, config=config, timing_log=timing_log)
            )
            result.sources_read.append(document.source)
            continue

        logger.warning(message)
        result.warnings.append(message)
        result.sources_skipped.append(str(path))

    if config.strict and not result.sources_read:
        raise ExtractionError("No source could be read")

    logger.info(
        f"Extracted {result.question_count} questions from "
        f"{len(result.sources_read)} source(s)"
    )
    return result


def write_dataset(
    records: Iterable[QuestionRecord],
    output_path: Path,
    *,
    config: Optional[ExtractionConfig] = None,
) -> Path:
    """
    Write records as the dataset JSON file.

    Raises:
        ValidationError: If config.validate_output and a record violates
            the dataset schema
    """
    config = config or ExtractionConfig()
    content = dumps_dataset(records, validate=config.validate_output)
    locked_write_text(output_path, content)
    logger.debug(f"Dataset written to {output_path}")
    return output_path
