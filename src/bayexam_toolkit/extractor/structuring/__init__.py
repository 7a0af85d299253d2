"""
Module: extractor.structuring

Purpose:
    Turns recognized lines into structure: documents into blocks, blocks
    into question fields.

Key Modules:
    - segmenter: Document -> Block list
    - collectors: Question text, options, answer line, explanation stages
    - block_parser: Runs the stages for one block
"""

from .block_parser import ParsedBlock, parse_block
from .segmenter import segment_blocks

__all__ = [
    "ParsedBlock",
    "parse_block",
    "segment_blocks",
]
