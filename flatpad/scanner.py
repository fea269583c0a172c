import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Set

from .models import FileEntry

log = logging.getLogger(__name__)

class FolderScanner:
    """Walks a folder depth-first (optionally recursively) and yields FileEntry objects.

    Each directory is listed exactly once, when the walk reaches it, and the
    listing is materialized before any entry is handed out so callers may
    move or rename the yielded files while the walk is still running.
    """

    def __init__(self, root: Path, recursive: bool = True, skip: Iterable[Path] = ()):
        self.root = root
        self.recursive = recursive
        self.skip: Set[Path] = {p.resolve() for p in skip}

    def walk(self) -> Iterator[FileEntry]:
        yield from self._walk_dir(self.root)

    def scan(self) -> List[FileEntry]:
        return list(self.walk())

    def _walk_dir(self, directory: Path) -> Iterator[FileEntry]:
        log.debug("Scanning directory: %s", directory)
        entries = list(directory.iterdir())
        for p in entries:
            if p.is_file():
                yield FileEntry.from_path(p)
            elif p.is_dir() and self.recursive:
                if p.resolve() in self.skip:
                    log.debug("Skipping directory: %s", p)
                    continue
                yield from self._walk_dir(p)
