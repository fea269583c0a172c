from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# RenameResult.status values
RENAMED = "renamed"
UNCHANGED = "unchanged"
CONFLICT = "conflict"
NO_MATCH = "no_match"

@dataclass(frozen=True)
class FileEntry:
    path: Path
    name: str
    stem: str
    ext: str  # includes the dot, "" when there is none

    @classmethod
    def from_path(cls, path: Path) -> "FileEntry":
        return cls(path=path, name=path.name, stem=path.stem, ext=path.suffix)

@dataclass(frozen=True)
class MoveResult:
    src: Path
    dst: Path
    performed: bool
    reason: str = ""  # e.g., "exists, renamed", "same location"


@dataclass(frozen=True)
class RenameResult:
    path: Path
    new_name: Optional[str]
    status: str
