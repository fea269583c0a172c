from pathlib import Path
from typing import Tuple

from .errors import InvalidPathError
from .settings import COLLISION_SEPARATOR

def validate_directory(path: Path) -> Path:
    """Return `path` if it names an existing directory, else raise InvalidPathError."""
    if not path.exists():
        raise InvalidPathError(path, f"Directory '{path}' does not exist")
    if not path.is_dir():
        raise InvalidPathError(path, f"'{path}' is not a directory")
    return path


def split_name(name: str) -> Tuple[str, str]:
    """Split a file name into (stem, ext) at the last dot; ext keeps the dot."""
    p = Path(name)
    return p.stem, p.suffix


def unique_path(dest: Path) -> Path:
    """
    If dest exists, append '_1', '_2', ... before the suffix.
    Returns a Path that does not exist.
    """
    if not dest.exists():
        return dest

    stem, suffix = split_name(dest.name)
    parent = dest.parent
    i = 1
    while True:
        candidate = parent / f"{stem}{COLLISION_SEPARATOR}{i}{suffix}"
        if not candidate.exists():
            return candidate
        i += 1


def is_within(path: Path, root: Path) -> bool:
    """True if `path` is `root` or lies somewhere beneath it."""
    try:
        path.resolve().relative_to(root.resolve())
    except ValueError:
        return False
    return True
