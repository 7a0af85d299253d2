"""
Module: extractor.cursor

Purpose:
    Forward-only cursor over an immutable sequence of lines. Every parse
    stage advances the same cursor, so the position where one stage stops
    is exactly where the next one starts.

Key Classes:
    - LineCursor: peek / advance / take_while / skip_blank over a line tuple

Used By:
    - extractor.structuring.collectors: All four stage collectors
    - extractor.structuring.segmenter: Line iteration during segmentation
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Sequence


class LineCursor:
    """
    Cursor over a line sequence.

    Lines handed out by the cursor are stripped of surrounding whitespace;
    the underlying sequence is never modified.

    Example:
        >>> cursor = LineCursor(["", "A) x", "B) y", "Cevap: A"])
        >>> cursor.skip_blank()
        >>> cursor.take_while(lambda line: line[:1] in "AB")
        ['A) x', 'B) y']
        >>> cursor.peek()
        'Cevap: A'
    """

    def __init__(self, lines: Sequence[str], position: int = 0):
        self._lines = tuple(lines)
        self._position = position

    @property
    def position(self) -> int:
        return self._position

    @property
    def at_end(self) -> bool:
        return self._position >= len(self._lines)

    def peek(self) -> Optional[str]:
        """Return the current line (stripped) without consuming it."""
        if self.at_end:
            return None
        return self._lines[self._position].strip()

    def advance(self) -> Optional[str]:
        """Consume and return the current line (stripped)."""
        line = self.peek()
        if line is not None:
            self._position += 1
        return line

    def skip_blank(self) -> None:
        """Consume blank lines up to the next non-blank line."""
        while not self.at_end and not self.peek():
            self._position += 1

    def take_while(self, predicate: Callable[[str], bool], *, skip_blank: bool = True) -> list[str]:
        """
        Consume lines while ``predicate`` holds.

        Blank lines are skipped without being passed to the predicate and
        are not returned, unless ``skip_blank`` is False.

        Returns:
            The consumed lines that satisfied the predicate
        """
        taken: list[str] = []
        while not self.at_end:
            line = self.peek()
            if not line and skip_blank:
                self._position += 1
                continue
            if not predicate(line):
                break
            taken.append(line)
            self._position += 1
        return taken

    def find(self, predicate: Callable[[str], bool]) -> Optional[int]:
        """Return the index of the next line matching ``predicate``, without moving."""
        for index in range(self._position, len(self._lines)):
            if predicate(self._lines[index].strip()):
                return index
        return None

    def seek(self, position: int) -> None:
        """Move to an absolute position; the cursor never moves backwards."""
        if position < self._position:
            raise ValueError(f"Cannot seek backwards: {position} < {self._position}")
        self._position = min(position, len(self._lines))

    def __iter__(self) -> Iterator[str]:
        while not self.at_end:
            yield self.advance()
