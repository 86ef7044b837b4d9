import subprocess
import pytest
from pathlib import Path
from takeout_reshelf.exceptions import ExternalToolError
from takeout_reshelf.postprocess import ExifTool
from takeout_reshelf import postprocess


class FakeRun:
    def __init__(self, returncode=0):
        self.returncode = returncode
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        return subprocess.CompletedProcess(cmd, self.returncode)


def test_exiftool_command_line(monkeypatch, tmp_path):
    fake = FakeRun()
    monkeypatch.setattr(postprocess.shutil, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(postprocess.subprocess, "run", fake)

    ExifTool().update_file_dates(tmp_path)

    cmd, kwargs = fake.calls[0]
    assert cmd == ["/usr/bin/exiftool", "-FileModifyDate<CreateDate", "-ext", "*", "-r", str(tmp_path)]
    # Output streams pass through
    assert "stdout" not in kwargs and "capture_output" not in kwargs

def test_exiftool_nonzero_exit(monkeypatch, tmp_path):
    monkeypatch.setattr(postprocess.shutil, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(postprocess.subprocess, "run", FakeRun(returncode=2))

    with pytest.raises(ExternalToolError) as exc:
        ExifTool().update_file_dates(tmp_path)
    assert "exit status 2" in str(exc.value)
    assert str(tmp_path) in str(exc.value)

def test_exiftool_missing(monkeypatch, tmp_path):
    monkeypatch.setattr(postprocess.shutil, "which", lambda name: None)

    with pytest.raises(ExternalToolError) as exc:
        ExifTool("not-exiftool").update_file_dates(tmp_path)
    assert "not-exiftool" in str(exc.value)
