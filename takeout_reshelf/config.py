"""
Configuration constants for the takeout reshelver.
"""

# --- Source Layout ---
# Everything we touch lives under <source>/Google Photos
GOOGLE_PHOTOS_DIR = "Google Photos"
ARCHIVE_DIR_NAME = "Archive"
TRASH_DIR_NAME = "Trash"
YEAR_FOLDER_PATTERN = r'Photos from (\d{4})'

# Takeout writes one JSON sidecar per photo. We never read them.
SIDECAR_EXTS = {'.json'}

# --- Target Layout ---
PHOTOS_DIR_NAME = "Photos"
TARGET_ARCHIVE_DIR_NAME = "Archive"
ALBUM_ONLY_DIR_NAME = "Album-only Photos"
ALBUMS_DIR_NAME = "Albums"

LOG_FILE_NAME = "reshelf.log"

# --- Hashing ---
HASH_CHUNK_SIZE = 64 * 1024  # 64 KB chunks for reading

# --- Post-processing ---
# Sets FileModifyDate from the embedded CreateDate, recursively, in place.
EXIFTOOL_EXECUTABLE = "exiftool"
EXIFTOOL_ARGS = ["-FileModifyDate<CreateDate", "-ext", "*", "-r"]
