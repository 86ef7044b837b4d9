import os
import logging
from pathlib import Path

from ..exceptions import LinkingError
from ..models import PhotoIndex, RunSummary, Store, TargetLayout
from ..scanning.hasher import FileHasher
from .placement import move_into_place


class LinkMaterializer:
    """
    Turns album members into symlinks.

    An album member whose content is already indexed links to the indexed
    file and its source copy is left where it is. Anything else is moved into
    'Album-only Photos' first and indexed, so the next album holding the same
    bytes links to that one copy.
    """

    def __init__(self, layout: TargetLayout, index: PhotoIndex, hasher: FileHasher, summary: RunSummary):
        self.layout = layout
        self.index = index
        self.hasher = hasher
        self.summary = summary

    def link(self, source: Path, album_dir: Path) -> Path:
        fingerprint = self.hasher.compute_hash(source)

        backing = self.index.lookup(fingerprint)
        if backing is not None:
            self.summary.album_links_reused += 1
        else:
            desired = self.layout.album_only / source.name
            backing = move_into_place(source, desired, fingerprint)
            if backing != desired:
                self.summary.collision_renames += 1
            self.index.record(fingerprint, backing, Store.ALBUM_ONLY)
            self.summary.album_only_moved += 1

        link_path = album_dir / source.name
        try:
            relative = os.path.relpath(backing, album_dir)
        except ValueError as e:
            # Windows: no relative path across drives
            raise LinkingError(f"failed to get relative path for album photo {link_path}: {e}") from e

        try:
            os.symlink(relative, link_path)
        except OSError as e:
            raise LinkingError(f"failed to create symlink for album photo {link_path}: {e}") from e

        logging.debug(f"Linked {link_path} -> {relative}")
        self.summary.album_links += 1
        return link_path
