import logging
from pathlib import Path

from tqdm import tqdm

from ..models import PhotoIndex, RunSummary, Store, TargetLayout
from ..scanning.filesystem import SourceTree
from ..scanning.hasher import FileHasher
from .linker import LinkMaterializer
from .placement import move_into_place


class DirectoryReconciler:
    """
    Moves a Takeout export into the target layout and builds the PhotoIndex.

    Three passes, always in this order:
      1. Year folders -> Photos        (indexed, Store.PHOTOS)
      2. Archive      -> Archive       (always moved, indexed only if new)
      3. Albums       -> Albums/<name> (symlinks, via LinkMaterializer)

    Later passes look up what earlier ones indexed, so the order is the
    precedence rule of Store. Any error aborts the run; files already moved
    stay moved.
    """

    def __init__(self,
                 tree: SourceTree,
                 layout: TargetLayout,
                 index: PhotoIndex,
                 hasher: FileHasher,
                 summary: RunSummary):
        self.tree = tree
        self.layout = layout
        self.index = index
        self.hasher = hasher
        self.summary = summary

    def run(self, materializer: LinkMaterializer):
        self.main_pass()
        self.archive_pass()
        self.album_pass(materializer)

    def main_pass(self):
        logging.info("Moving and indexing main-directory photos...")
        self.layout.ensure(self.layout.photos)

        for year_dir in self.tree.year_folders():
            for source in self._members(year_dir):
                self._move_and_index(source, self.layout.photos, Store.PHOTOS)
                self.summary.photos_moved += 1

    def archive_pass(self):
        logging.info("Moving archive...")
        self.layout.ensure(self.layout.archive)

        for source in self._members(self.tree.archive_dir):
            # Archive keeps a full physical copy even when Photos has the same bytes.
            if not self._move_and_index(source, self.layout.archive, Store.ARCHIVE):
                self.summary.archive_duplicates += 1
            self.summary.archive_moved += 1

    def album_pass(self, materializer: LinkMaterializer):
        logging.info("Moving albums...")
        self.layout.ensure(self.layout.album_only)
        self.layout.ensure(self.layout.albums)

        for album_dir in self.tree.album_folders():
            target_album_dir = self.layout.ensure(self.layout.album_dir(album_dir.name))
            for source in self._members(album_dir):
                materializer.link(source, target_album_dir)

    def _move_and_index(self, source: Path, target_dir: Path, store: Store) -> bool:
        fingerprint = self.hasher.compute_hash(source)
        desired = target_dir / source.name
        final = move_into_place(source, desired, fingerprint)
        if final != desired:
            self.summary.collision_renames += 1
        return self.index.record(fingerprint, final, store)

    def _members(self, directory: Path):
        listing = self.tree.members(directory)
        self.summary.sidecars_skipped += len(listing.sidecars)
        # disable=None turns the bar off when stderr is not a terminal
        return tqdm(listing.files, desc=directory.name, unit="file", disable=None)
