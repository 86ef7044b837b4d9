import logging
import shutil
import subprocess
from pathlib import Path
from typing import Optional, Protocol

from . import config
from .exceptions import ExternalToolError


class MetadataTool(Protocol):
    def update_file_dates(self, directory: Path) -> None:
        ...


class ExifTool:
    """
    Wraps the 'exiftool' command line utility.
    Must be installed and on the system PATH.

    Rewrites each file's modification time from its embedded creation date,
    recursively and in place. Output goes straight to our stdout/stderr.
    """

    def __init__(self, executable: str = config.EXIFTOOL_EXECUTABLE):
        self.executable = executable

    def locate(self) -> str:
        found: Optional[str] = shutil.which(self.executable)
        if not found:
            raise ExternalToolError(f"exiftool not found: {self.executable!r} is not on PATH")
        return found

    def update_file_dates(self, directory: Path) -> None:
        cmd = [self.locate(), *config.EXIFTOOL_ARGS, str(directory)]
        logging.debug(f"Running {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd)
        except OSError as e:
            raise ExternalToolError(f"failed to run exiftool on {directory}: {e}") from e

        if result.returncode != 0:
            raise ExternalToolError(
                f"failed to run exiftool on {directory}: exit status {result.returncode}"
            )
