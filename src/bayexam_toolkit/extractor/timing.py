"""
Module: extractor.timing

Purpose:
    Phase timings for an extraction run: run-level phases (extraction,
    write) and per-source phases (segmentation, parsing). Timings live in
    their own optional file so the dataset stays byte-identical between
    runs on the same input.

Key Classes:
    - TimingLog: Collected timings for one run

Key Functions:
    - timed_phase: Context manager recording the duration of a block

Used By:
    - extractor.pipeline: Per-source segmentation and parsing
    - cli: Run phases and the --timing-log file
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Generator, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass
class TimingLog:
    """
    Durations in seconds, keyed by phase.

    Attributes:
        run_timings: phase -> duration for whole-run phases
        source_timings: source label -> {phase -> duration}

    Example:
        >>> log = TimingLog()
        >>> log.log_source("1.txt", "parsing", 0.012)
        >>> log.get_source_total("1.txt")
        0.012
    """
    run_timings: Dict[str, float] = field(default_factory=dict)
    source_timings: Dict[str, Dict[str, float]] = field(default_factory=dict)

    def log_run(self, phase: str, duration: float) -> None:
        self.run_timings[phase] = duration

    def log_source(self, source: str, phase: str, duration: float) -> None:
        self.source_timings.setdefault(source, {})[phase] = duration

    def get_source_total(self, source: str) -> float:
        return sum(self.source_timings.get(source, {}).values())

    def get_slowest_sources(self, n: int = 3) -> List[Tuple[str, float]]:
        """Sources ordered by total time, slowest first."""
        totals = {source: self.get_source_total(source) for source in self.source_timings}
        return sorted(totals.items(), key=lambda item: item[1], reverse=True)[:n]

    def summary(self) -> str:
        """Multi-line report for debug logging."""
        lines = ["Timings:"]
        lines.extend(
            f"  {phase:<14} {duration:.3f}s"
            for phase, duration in sorted(self.run_timings.items())
        )
        for source, total in self.get_slowest_sources():
            lines.append(f"  {source}: {total:.3f}s")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "run_timings": dict(self.run_timings),
            "source_timings": {k: dict(v) for k, v in self.source_timings.items()},
        }

    def save(self, path: Path) -> None:
        """
        Merge these timings into the JSON file at ``path``.

        Runs sharing one file accumulate their sources; a source or run
        phase seen again keeps the latest duration.
        """
        from .file_locking import locked_read_modify_write_json

        current = self.to_dict()

        def merge(data: Dict[str, Any]) -> Dict[str, Any]:
            for key, entries in current.items():
                data.setdefault(key, {}).update(entries)
            return data

        locked_read_modify_write_json(path, merge, default=dict)
        logger.debug(f"Timings merged into {path}")


@contextmanager
def timed_phase(
    log: TimingLog,
    phase: str,
    source: Optional[str] = None,
) -> Generator[None, None, None]:
    """
    Record how long the enclosed block takes, even if it raises.

    Args:
        log: Destination TimingLog
        phase: Phase name
        source: Source label for per-source phases; None for run phases

    Example:
        >>> with timed_phase(log, "segmentation", source="1.txt"):
        ...     blocks = segment_blocks(document)
    """
    started = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - started
        if source is None:
            log.log_run(phase, duration)
        else:
            log.log_source(source, phase, duration)
