"""
Tests for extractor.config
"""
import pytest

from bayexam_toolkit.extractor.config import BLOCK_START_RULE_NAMES, ExtractionConfig


def test_defaults_enable_every_rule():
    config = ExtractionConfig()

    assert config.block_start_rules == BLOCK_START_RULE_NAMES
    assert config.join_leading_text is False
    assert config.encoding == "utf-8"
    assert config.validate_output is True
    assert config.strict is False


def test_unknown_rule_raises():
    with pytest.raises(ValueError, match="Unknown block-start rules"):
        ExtractionConfig(block_start_rules=("numbered", "roman"))


def test_no_rules_raises():
    with pytest.raises(ValueError, match="At least one"):
        ExtractionConfig(block_start_rules=())


def test_config_is_frozen():
    config = ExtractionConfig()
    with pytest.raises(Exception):
        config.strict = True
