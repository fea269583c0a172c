import logging
import shutil
from pathlib import Path
from typing import List

from .models import MoveResult
from .scanner import FolderScanner
from .utils import is_within, unique_path

log = logging.getLogger(__name__)

class FlatMover:
    """Moves files into a single flat destination folder, renaming around collisions."""

    def __init__(self, dest_dir: Path):
        self.dest_dir = dest_dir

    def move_one(self, src: Path) -> MoveResult:
        # Already a direct child of the destination: nothing to do
        if src.parent.resolve() == self.dest_dir.resolve():
            log.debug("Skipping: '%s' (already in destination)", src)
            return MoveResult(src, src, performed=False, reason="same location")

        dest_file = self.dest_dir / src.name
        if dest_file.exists():
            dest_file = unique_path(dest_file)
            reason = "exists, renamed"
        else:
            reason = ""

        log.info("Moving: %s -> %s", src, dest_file)
        shutil.move(str(src), str(dest_file))
        return MoveResult(src, dest_file, performed=True, reason=reason)

    def collect(self, source: Path) -> List[MoveResult]:
        """Move every file under `source`, at any depth, into the destination.

        Files are moved as the walk reaches them. An OSError aborts the walk
        and propagates; files moved before it stay where they were moved.
        """
        skip = []
        if is_within(self.dest_dir, source) and not is_within(source, self.dest_dir):
            # Destination lives inside the source tree; don't walk into it
            skip.append(self.dest_dir)

        scanner = FolderScanner(source, recursive=True, skip=skip)
        results: List[MoveResult] = []
        for entry in scanner.walk():
            results.append(self.move_one(entry.path))
        return results
