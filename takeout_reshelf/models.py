import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from . import config
from .exceptions import FileOperationError

_YEAR_FOLDER_RE = re.compile(config.YEAR_FOLDER_PATTERN)


class SourceCategory(Enum):
    YEAR_FOLDER = "year_folder"
    ARCHIVE = "archive"
    TRASH = "trash"
    ALBUM = "album"

    @classmethod
    def of(cls, name: str) -> "SourceCategory":
        """Classifies a top-level 'Google Photos' directory by its name."""
        if _YEAR_FOLDER_RE.search(name):
            return cls.YEAR_FOLDER
        if name == config.TRASH_DIR_NAME:
            return cls.TRASH
        if name == config.ARCHIVE_DIR_NAME:
            return cls.ARCHIVE
        return cls.ALBUM


class Store(Enum):
    """
    Physical stores a photo can end up in, in order of precedence.

    When the same content lands in more than one store, the index points at
    the store with the lowest rank: a year-folder copy beats an archived copy,
    which beats an album-only copy. The reconciler's pass order (main, archive,
    albums) follows this ranking.
    """
    PHOTOS = 0
    ARCHIVE = 1
    ALBUM_ONLY = 2

    def outranks(self, other: "Store") -> bool:
        return self.value < other.value


@dataclass(frozen=True)
class IndexEntry:
    path: Path
    store: Store


class PhotoIndex:
    """
    Fingerprint -> real file in one of the target stores.

    Entries are never removed. A recorded path is a regular file that stays
    on disk for the rest of the run. The first writer keeps its entry unless
    a later writer comes from a store that strictly outranks it.
    """

    def __init__(self):
        self._entries: Dict[str, IndexEntry] = {}

    def record(self, fingerprint: str, path: Path, store: Store) -> bool:
        existing = self._entries.get(fingerprint)
        if existing is not None and not store.outranks(existing.store):
            logging.debug(f"Index keeps {existing.path} for {fingerprint}; ignoring {path}")
            return False
        self._entries[fingerprint] = IndexEntry(Path(path), store)
        return True

    def lookup(self, fingerprint: str) -> Optional[Path]:
        entry = self._entries.get(fingerprint)
        return entry.path if entry else None

    def entry(self, fingerprint: str) -> Optional[IndexEntry]:
        return self._entries.get(fingerprint)

    def __contains__(self, fingerprint: str) -> bool:
        return fingerprint in self._entries

    def __len__(self) -> int:
        return len(self._entries)


@dataclass
class TargetLayout:
    """
    The four top-level destination directories.
    """
    root: Path
    photos: Path
    archive: Path
    album_only: Path
    albums: Path

    @classmethod
    def under(cls, root: Path) -> "TargetLayout":
        root = Path(root)
        return cls(
            root=root,
            photos=root / config.PHOTOS_DIR_NAME,
            archive=root / config.TARGET_ARCHIVE_DIR_NAME,
            album_only=root / config.ALBUM_ONLY_DIR_NAME,
            albums=root / config.ALBUMS_DIR_NAME,
        )

    def album_dir(self, album_name: str) -> Path:
        return self.albums / album_name

    def ensure(self, directory: Path) -> Path:
        """Creates a directory (and parents). No-op if it already exists."""
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileOperationError(f"failed to create directory {directory}: {e}") from e
        return directory

    def post_process_dirs(self) -> List[Path]:
        # Albums only hold symlinks, so the metadata tool never sees them.
        return [self.photos, self.archive, self.album_only]


@dataclass
class RunSummary:
    photos_moved: int = 0
    archive_moved: int = 0
    archive_duplicates: int = 0
    album_only_moved: int = 0
    album_links: int = 0
    album_links_reused: int = 0
    sidecars_skipped: int = 0
    collision_renames: int = 0

    def log(self):
        logging.info("=== Summary ===")
        logging.info(f"Photos moved:            {self.photos_moved}")
        logging.info(f"Archive moved:           {self.archive_moved} "
                     f"({self.archive_duplicates} already indexed)")
        logging.info(f"Album links:             {self.album_links} "
                     f"({self.album_links_reused} to existing files)")
        logging.info(f"Album-only photos moved: {self.album_only_moved}")
        logging.info(f"Collision renames:       {self.collision_renames}")
        logging.info(f"Sidecars skipped:        {self.sidecars_skipped}")
