import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .. import config
from ..exceptions import DirectoryReadError
from ..models import SourceCategory


@dataclass
class DirectoryListing:
    """Members of one source directory, sidecars split out."""
    directory: Path
    files: List[Path] = field(default_factory=list)
    sidecars: List[Path] = field(default_factory=list)


class SourceTree:
    """
    Read-only view of a Takeout export rooted at <source>/Google Photos.
    """

    def __init__(self, source_root: Path):
        self.source_root = Path(source_root)
        self.root = self.source_root / config.GOOGLE_PHOTOS_DIR

    @property
    def archive_dir(self) -> Path:
        return self.root / config.ARCHIVE_DIR_NAME

    def top_level_dirs(self) -> List[Path]:
        """Directories directly under 'Google Photos', sorted by name."""
        return [Path(e.path) for e in self._scan(self.root) if e.is_dir(follow_symlinks=False)]

    def year_folders(self) -> List[Path]:
        return [d for d in self.top_level_dirs()
                if SourceCategory.of(d.name) is SourceCategory.YEAR_FOLDER]

    def album_folders(self) -> List[Path]:
        """Everything that is not a year folder, the Archive or the Trash."""
        return [d for d in self.top_level_dirs()
                if SourceCategory.of(d.name) is SourceCategory.ALBUM]

    def members(self, directory: Path) -> DirectoryListing:
        """
        Lists the entries of a source directory in name order.

        Sidecars are recognised by extension only and are never opened.
        Anything else is returned as a member, including nested directories,
        which will fail loudly when hashed.
        """
        listing = DirectoryListing(directory)
        for e in self._scan(directory):
            path = Path(e.path)
            if path.suffix.lower() in config.SIDECAR_EXTS:
                listing.sidecars.append(path)
            else:
                listing.files.append(path)

        if listing.sidecars:
            logging.debug(f"Skipping {len(listing.sidecars)} sidecars in {directory}")
        return listing

    def _scan(self, directory: Path) -> List[os.DirEntry]:
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            raise DirectoryReadError(f"failed to read directory {directory}: {e}") from e

        # Sort for stable traversal order
        entries.sort(key=lambda e: e.name)
        return entries
