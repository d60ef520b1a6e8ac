import io
import sys
from pathlib import Path

import pytest

# Put python/ on sys.path so the tool modules import without installing.
TOOLS_PATH = Path(__file__).resolve().parent.parent / "python"
if TOOLS_PATH.as_posix() not in sys.path:
    sys.path.insert(0, TOOLS_PATH.as_posix())


@pytest.fixture
def make_file(tmp_path: Path):
    """Write bytes to a file under tmp_path and return its path as a string."""
    def _make(name, data: bytes):
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)
    return _make


@pytest.fixture
def stdin_bytes(monkeypatch):
    """Replace sys.stdin with a stream holding the given bytes."""
    def _feed(data: bytes):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))
    return _feed
