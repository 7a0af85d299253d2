"""
Module: extractor.config

Purpose:
    Configuration dataclass for the text extraction pipeline. Provides
    immutable settings for which block-start conventions are recognized
    and how the dataset is written.

Key Classes:
    - ExtractionConfig: Main configuration for extraction

Dependencies:
    - dataclasses: For frozen dataclass support

Used By:
    - extractor.pipeline: Uses ExtractionConfig for pipeline settings
    - extractor.structuring.segmenter: Reads the enabled block-start rules
    - cli: Builds a config from command-line flags
"""

from dataclasses import dataclass

BLOCK_START_RULE_NAMES = ("numbered", "soru", "bullet")


@dataclass(frozen=True)
class ExtractionConfig:
    """
    Configuration for the question extraction pipeline.

    Attributes:
        block_start_rules: Names of enabled block-start rules. Precedence is
            always numbered > soru > bullet regardless of order given here.
        join_leading_text: Prefix the marker line's text to the prompt
            collected from the block body instead of using it only when the
            body yields nothing (default False)
        encoding: Encoding of the input files (default "utf-8")
        validate_output: Validate the dataset against the JSON schema
            before writing (default True)
        strict: Raise ExtractionError when none of the sources could be
            read (default False)
    """
    block_start_rules: tuple[str, ...] = BLOCK_START_RULE_NAMES
    join_leading_text: bool = False
    encoding: str = "utf-8"
    validate_output: bool = True
    strict: bool = False

    def __post_init__(self) -> None:
        unknown = [name for name in self.block_start_rules if name not in BLOCK_START_RULE_NAMES]
        if unknown:
            raise ValueError(f"Unknown block-start rules: {unknown}")
        if not self.block_start_rules:
            raise ValueError("At least one block-start rule must be enabled")
