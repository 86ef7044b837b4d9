import hashlib
from pathlib import Path

from .. import config
from ..exceptions import FileHashError


class FileHasher:
    def compute_hash(self, path: Path) -> str:
        """
        Computes the content fingerprint of a file.

        Streams the whole file through SHA-1 and returns the lowercase hex
        digest (40 chars). There is no sparse shortcut here: the fingerprint
        decides which copy becomes canonical, so every byte counts.

        Raises FileHashError if the file cannot be opened or read.
        """
        h = hashlib.sha1()
        try:
            with open(path, 'rb') as f:
                while chunk := f.read(config.HASH_CHUNK_SIZE):
                    h.update(chunk)
        except OSError as e:
            raise FileHashError(f"failed to hash file {path}: {e}") from e
        return h.hexdigest()
