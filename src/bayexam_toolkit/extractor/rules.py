"""
Module: extractor.rules

Purpose:
    Named recognizer rules. A rule pairs a compiled pattern with an
    extractor turning the match into a value; rule sets are plain tuples
    evaluated in order, so adding a new source convention means appending
    a rule without touching the existing ones.

Key Classes:
    - Rule: Named pattern + extractor pair
    - RuleMatch: Result of the first matching rule

Key Functions:
    - first_match(): Evaluate a rule tuple in precedence order
    - matches_any(): Boolean shortcut used as a stop predicate

Used By:
    - extractor.detection.*: Block-start, option, answer and marker rules
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


def _whole_match(match: re.Match) -> str:
    return match.group(0)


@dataclass(frozen=True)
class Rule(Generic[T]):
    """
    A named line recognizer.

    Attributes:
        name: Identifier used in logs and configuration
        pattern: Compiled pattern, applied with ``search``
        extract: Builds the rule's value from the match

    Example:
        >>> rule = Rule("digits", re.compile(r"^(\\d+)"), lambda m: int(m.group(1)))
        >>> rule.apply("42) text")
        42
    """
    name: str
    pattern: re.Pattern
    extract: Callable[[re.Match], T] = _whole_match

    def apply(self, line: str) -> Optional[T]:
        """Return the extracted value, or None if the pattern does not match."""
        match = self.pattern.search(line)
        if match is None:
            return None
        return self.extract(match)


@dataclass(frozen=True)
class RuleMatch(Generic[T]):
    """The rule that matched a line and the value it extracted."""
    rule: str
    value: T


def first_match(rules: Iterable[Rule[T]], line: str) -> Optional[RuleMatch[T]]:
    """
    Evaluate rules in order and return the first hit.

    Args:
        rules: Rules in precedence order
        line: Line to test

    Returns:
        RuleMatch for the first rule whose pattern matches, else None
    """
    for rule in rules:
        value = rule.apply(line)
        if value is not None:
            return RuleMatch(rule.name, value)
    return None


def matches_any(rules: Iterable[Rule], line: str) -> bool:
    return first_match(rules, line) is not None
