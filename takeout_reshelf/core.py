import logging
from pathlib import Path
from typing import Optional

from .models import PhotoIndex, RunSummary, TargetLayout
from .organization.linker import LinkMaterializer
from .organization.reconciler import DirectoryReconciler
from .postprocess import MetadataTool
from .scanning.filesystem import SourceTree
from .scanning.hasher import FileHasher


class TakeoutReshelfApp:
    def __init__(self, metadata_tool: Optional[MetadataTool] = None):
        self.metadata_tool = metadata_tool
        self.hasher = FileHasher()

    def reshelve(self, source_root: Path, target_root: Path) -> RunSummary:
        """
        Runs the whole pipeline once.
        1. Main photos  -> Photos
        2. Archive      -> Archive
        3. Albums       -> Albums (+ Album-only Photos)
        4. Metadata tool over the three real-file stores

        The index lives only for this call.
        """
        tree = SourceTree(source_root)
        layout = TargetLayout.under(target_root)
        index = PhotoIndex()
        summary = RunSummary()

        reconciler = DirectoryReconciler(tree, layout, index, self.hasher, summary)
        materializer = LinkMaterializer(layout, index, self.hasher, summary)
        reconciler.run(materializer)

        logging.info(f"Indexed {len(index)} distinct photos.")

        if self.metadata_tool is not None:
            self._post_process(layout)
        else:
            logging.info("Skipping file date update.")

        summary.log()
        return summary

    def _post_process(self, layout: TargetLayout):
        logging.info("Updating file modified date based on exif creation date via exiftool...")
        for directory in layout.post_process_dirs():
            self.metadata_tool.update_file_dates(directory)
        logging.info("Updating completed.")
