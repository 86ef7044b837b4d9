import os
import logging
from pathlib import Path

from ..exceptions import FileOperationError


def resolve_placement(desired: Path, fingerprint: str) -> Path:
    """
    Picks the on-disk path for a file headed to `desired`.

    If nothing sits at `desired` it is used as is. Otherwise the fingerprint
    is inserted before the extension: 'IMG_1.jpg' -> 'IMG_1_<fingerprint>.jpg'.
    This only looks at names, never at content; two identical files at the
    same desired path still get two paths.
    """
    desired = Path(desired)
    # lexists: a dangling symlink still occupies the name
    if not os.path.lexists(desired):
        return desired
    return desired.with_name(f"{desired.stem}_{fingerprint}{desired.suffix}")


def move_into_place(source: Path, desired: Path, fingerprint: str) -> Path:
    """Renames `source` to its resolved placement and returns where it landed."""
    target = resolve_placement(desired, fingerprint)
    if target != Path(desired):
        logging.debug(f"Name collision at {desired}; using {target.name}")

    try:
        os.rename(source, target)
    except OSError as e:
        raise FileOperationError(f"failed to move photo {source} to {target}: {e}") from e
    return target
