import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import bayexam_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def write_source(tmp_path: Path):
    """Write a UTF-8 text source into tmp_path and return its path."""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path
    return _write


@pytest.fixture
def sky_question_text() -> str:
    """A single numbered question with options on separate lines."""
    return "1) What color is the sky?\nA) Red\nB) Blue\nC) Green\nAnswer: B\n"
