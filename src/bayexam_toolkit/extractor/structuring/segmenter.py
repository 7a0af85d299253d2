"""
Module: extractor.structuring.segmenter

Purpose:
    Block segmentation - splits a document's lines into per-question
    blocks at recognized start lines.

Key Functions:
    - segment_blocks(): RawDocument -> list of Block

Used By:
    - extractor.pipeline: First stage of every source
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from bayexam_toolkit.core.models import Block, RawDocument

from ..detection.starts import BLOCK_START_RULES, BlockStart, detect_block_start
from ..rules import Rule

logger = logging.getLogger(__name__)


def segment_blocks(
    document: RawDocument,
    rules: Sequence[Rule[BlockStart]] = BLOCK_START_RULES,
) -> List[Block]:
    """
    Split a document into question blocks.

    Lines before the first start line are discarded. Lines between start
    lines are kept verbatim in the open block's body. A start line without
    digits numbers its block by position among recognized blocks (1-based).

    Args:
        document: Source document
        rules: Enabled block-start rules in precedence order

    Returns:
        Blocks in document order

    Example:
        >>> doc = RawDocument.from_text("1.txt", "intro\\n1) Q?\\nA) x\\n2) R?")
        >>> [(b.number, b.leading_text, b.body) for b in segment_blocks(doc)]
        [(1, 'Q?', ('A) x',)), (2, 'R?', ())]
    """
    blocks: List[Block] = []
    current: Optional[BlockStart] = None
    body: List[str] = []
    skipped = 0

    for line in document.lines:
        start = detect_block_start(line, rules)
        if start is not None:
            if current is not None:
                blocks.append(_close(current, body, len(blocks) + 1))
            current, body = start, []
        elif current is not None:
            body.append(line)
        else:
            skipped += 1

    if current is not None:
        blocks.append(_close(current, body, len(blocks) + 1))

    logger.debug(
        f"Segmented {document.source}: {len(blocks)} blocks, "
        f"{skipped} lines before the first question"
    )
    return blocks


def _close(start: BlockStart, body: List[str], position: int) -> Block:
    number = start.number if start.number is not None else position
    return Block(number=number, leading_text=start.leading_text, body=tuple(body))
