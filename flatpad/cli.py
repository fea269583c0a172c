import argparse
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .errors import InvalidPathError
from .logging_setup import get_logging_level, setup_logging
from .models import RENAMED
from .mover import FlatMover
from .padder import PrefixPadder
from .utils import validate_directory


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flatpad",
        description="Move every file under a folder tree into one folder, "
                    "then zero-pad the numeric prefix of the file names there.",
    )
    parser.add_argument("source", nargs="?", type=Path, default=None,
                        help="Folder tree to collect files from (default: current directory)")
    parser.add_argument("dest", nargs="?", type=Path, default=None,
                        help="Folder to move the files into (default: current directory)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Also log directory traversal")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def collect_flow(source: Path, dest: Path) -> bool:
    print(f"Moving files from '{source}' and its subdirectories to '{dest}'...")
    try:
        results = FlatMover(dest).collect(source)
    except OSError as e:
        print(f"Error occurred: {e}", file=sys.stderr)
        return False
    moved = sum(1 for r in results if r.performed)
    print(f"Successfully moved {moved} file(s)!")
    return True


def pad_flow(dest: Path) -> bool:
    try:
        results = PrefixPadder(dest).pad_directory()
    except OSError as e:
        print(f"Error occurred: {e}", file=sys.stderr)
        return False
    renamed = sum(1 for r in results if r.status == RENAMED)
    print(f"Successfully renamed {renamed} file(s)!")
    return True


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(get_logging_level(args.verbose, args.quiet), args.log_file)

    # Invalid paths are reported, not treated as a failed run
    try:
        source = validate_directory(args.source or Path.cwd())
        dest = validate_directory(args.dest or Path.cwd())
    except InvalidPathError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 0

    # Each phase reports its own failure; one failing doesn't stop the other
    collect_flow(source, dest)
    pad_flow(dest)
    return 0
