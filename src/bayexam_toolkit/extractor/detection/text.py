"""
Module: extractor.detection.text

Purpose:
    Character classes and small text clean-up helpers shared by the line
    recognizers.

Key Functions:
    - strip_emphasis(): Remove surrounding markdown emphasis markers
    - remove_emphasis(): Remove every emphasis character
    - collapse_whitespace(): Single-space a fragment

Used By:
    - extractor.detection.*: Pattern construction and clean-up
    - extractor.structuring.collectors: Prompt and explanation assembly
"""

from __future__ import annotations

import re

# Latin letters plus the Turkish ones that can act as option labels
UPPER_LETTERS = "A-ZÇĞİÖŞÜ"
LETTERS = "A-Za-zÇĞİÖŞÜçğıöşü"

# Colon or full-width colon
COLON = "[:：]"

_SURROUNDING_EMPHASIS = re.compile(r"^[\s*_]+|[\s*_]+$")
_EMPHASIS = re.compile(r"[*_]")
_WHITESPACE = re.compile(r"\s+")


def strip_emphasis(text: str) -> str:
    """
    Remove emphasis markers (``*``, ``_``) surrounding a fragment.

    Example:
        >>> strip_emphasis("**Başkent neresidir?**")
        'Başkent neresidir?'
    """
    return _SURROUNDING_EMPHASIS.sub("", text)


def remove_emphasis(text: str) -> str:
    """Remove every emphasis character and trim."""
    return _EMPHASIS.sub("", text).strip()


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def join_fragments(fragments) -> str:
    """Join non-empty fragments with single spaces."""
    return " ".join(f for f in fragments if f).strip()
