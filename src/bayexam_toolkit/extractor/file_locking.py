"""
Module: extractor.file_locking

Purpose:
    Exclusive locks around the two files the extractor writes: the
    dataset JSON and the optional timing log. Two runs pointed at the same
    output never interleave their writes.

Key Functions:
    - locked_file: Open a file with a portalocker lock held
    - locked_write_text: Replace a file's content in place
    - locked_read_modify_write_json: Merge into a JSON document

Dependencies:
    - portalocker: Cross-platform file locking

Used By:
    - extractor.pipeline: Dataset writing
    - extractor.timing: Timing log merging
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, Generator, TextIO

import portalocker

logger = logging.getLogger(__name__)


@contextmanager
def locked_file(
    path: Path,
    mode: str = "r+",
    *,
    exclusive: bool = True,
) -> Generator[TextIO, None, None]:
    """
    Open ``path`` as UTF-8 text and hold a lock until the block exits.

    Missing parent directories are created. In read/update modes a missing
    file is created empty first, so the caller can lock before it decides
    what to write.

    Args:
        path: Target file
        mode: open() mode, e.g. "r+" or "a"
        exclusive: Exclusive lock if True, shared lock otherwise

    Example:
        >>> with locked_file(Path("data/questions.json")) as f:
        ...     f.truncate()
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if "r" in mode and not path.exists():
        path.touch()

    flags = portalocker.LOCK_EX if exclusive else portalocker.LOCK_SH
    with open(path, mode, encoding="utf-8", newline="\n") as handle:
        portalocker.lock(handle, flags)
        try:
            yield handle
        finally:
            portalocker.unlock(handle)


def locked_write_text(path: Path, content: str) -> None:
    """
    Replace the content of ``path`` under an exclusive lock.

    The file is opened without truncation and truncated only once the
    lock is held; a reader holding a shared lock sees either the old or
    the new dataset.
    """
    with locked_file(path) as handle:
        handle.seek(0)
        handle.truncate()
        handle.write(content)

    logger.debug(f"Wrote {len(content)} characters to {path.name}")


def locked_read_modify_write_json(
    path: Path,
    modifier: Callable[[Dict[str, Any]], Dict[str, Any]],
    default: Callable[[], Dict[str, Any]] = dict,
) -> Dict[str, Any]:
    """
    Merge into a JSON object file without losing concurrent updates.

    Args:
        path: JSON file holding one object
        modifier: Receives the current object and returns the new one
        default: Builds the starting object when the file is new or empty

    Returns:
        The object that was written
    """
    with locked_file(path) as handle:
        current = handle.read()
        data = json.loads(current) if current.strip() else default()

        updated = modifier(data)

        handle.seek(0)
        handle.truncate()
        json.dump(updated, handle, indent=2, ensure_ascii=False)

    return updated
