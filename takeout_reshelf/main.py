import argparse
import logging
import sys
from pathlib import Path

from . import config
from .core import TakeoutReshelfApp
from .exceptions import ReshelfError
from .postprocess import ExifTool

def setup_logging(dest_root: Path, verbose: bool):
    """Sets up logging to both console and a file in the destination."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Create dest root if it doesn't exist so we can log there
    dest_root.mkdir(parents=True, exist_ok=True)
    log_file = dest_root / config.LOG_FILE_NAME

    logging.basicConfig(
        level=log_level,
        force=True,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ]
    )

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Reshelve a Google Photos Takeout export into a deduplicated library")

    p.add_argument("src", type=Path, help="Takeout root (the directory holding 'Google Photos')")
    p.add_argument("dest", type=Path, help="Destination library root")

    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--skip-exiftool", action="store_true", help="Do not update file dates with exiftool")

    return p.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)

    dest_root = args.dest.resolve()
    src_root = args.src.resolve()

    setup_logging(dest_root, args.verbose)

    logging.info("=== Takeout Reshelf Started ===")
    logging.info(f"Source: {src_root}")
    logging.info(f"Dest:   {dest_root}")

    app = TakeoutReshelfApp(metadata_tool=None if args.skip_exiftool else ExifTool())

    try:
        app.reshelve(src_root, dest_root)
    except ReshelfError as e:
        logging.critical(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        sys.exit(1)
    except Exception:
        logging.exception("Fatal error during reshelving.")
        sys.exit(1)

if __name__ == "__main__":
    main()
