import pytest
from pathlib import Path
from takeout_reshelf.models import PhotoIndex, RunSummary, TargetLayout


class TakeoutBuilder:
    """Writes files into <root>/Google Photos/<folder>/<name>."""

    def __init__(self, root: Path):
        self.root = root
        self.google_photos = root / "Google Photos"
        self.google_photos.mkdir(parents=True)

    def add(self, folder: str, name: str, content: bytes, sidecar: bool = True) -> Path:
        d = self.google_photos / folder
        d.mkdir(parents=True, exist_ok=True)
        p = d / name
        p.write_bytes(content)
        if sidecar:
            (d / f"{name}.json").write_text('{"title": "%s"}' % name)
        return p

    def folder(self, folder: str) -> Path:
        d = self.google_photos / folder
        d.mkdir(parents=True, exist_ok=True)
        return d


@pytest.fixture
def takeout(tmp_path):
    """An empty Takeout export with an (empty) Archive folder."""
    builder = TakeoutBuilder(tmp_path / "src")
    builder.folder("Archive")
    return builder

@pytest.fixture
def layout(tmp_path):
    return TargetLayout.under(tmp_path / "dest")

@pytest.fixture
def index():
    return PhotoIndex()

@pytest.fixture
def summary():
    return RunSummary()
