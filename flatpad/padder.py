import logging
import re
from pathlib import Path
from typing import List, Optional

from .models import CONFLICT, NO_MATCH, RENAMED, UNCHANGED, RenameResult
from .scanner import FolderScanner
from .settings import PAD_CHAR, PAD_WIDTH, PREFIX_SEPARATOR

log = logging.getLogger(__name__)

_NUMERIC_RE = re.compile(r"\+?[0-9]+")


def parse_prefix(prefix: str) -> Optional[int]:
    """Return the prefix as a non-negative integer, or None if it isn't one."""
    if _NUMERIC_RE.fullmatch(prefix) is None:
        return None
    return int(prefix)


def generate_padded_name(name: str) -> Optional[str]:
    """Return `name` with its prefix padded to PAD_WIDTH, or None if it has no usable prefix.

    The prefix is everything before the first separator. Numeric prefixes are
    zero-padded as numbers and never truncated; other prefixes up to PAD_WIDTH
    characters are left-padded with PAD_CHAR, longer ones are not touched.
    """
    prefix, sep, rest = name.partition(PREFIX_SEPARATOR)
    if not sep:
        return None
    suffix = sep + rest

    number = parse_prefix(prefix)
    if number is not None:
        return f"{number:0{PAD_WIDTH}d}{suffix}"

    if len(prefix) <= PAD_WIDTH:
        return prefix.rjust(PAD_WIDTH, PAD_CHAR) + suffix
    return None


class PrefixPadder:
    """Renames the files directly inside one folder to their padded-prefix form."""

    def __init__(self, directory: Path):
        self.directory = directory

    def pad_one(self, path: Path) -> RenameResult:
        name = path.name
        new_name = generate_padded_name(name)
        if new_name is None:
            log.info("Skipping: '%s' (no dash found or invalid format)", name)
            return RenameResult(path, None, NO_MATCH)

        new_path = path.with_name(new_name)
        if new_path.exists() and new_path != path:
            log.warning(
                "Warning: Cannot rename '%s' to '%s' - target file already exists",
                name, new_name,
            )
            return RenameResult(path, new_name, CONFLICT)

        if new_name == name:
            log.info("Skipping: '%s' (already properly formatted)", name)
            return RenameResult(path, new_name, UNCHANGED)

        log.info("Renaming: '%s' -> '%s'", name, new_name)
        path.rename(new_path)
        return RenameResult(path, new_name, RENAMED)

    def pad_directory(self) -> List[RenameResult]:
        files = FolderScanner(self.directory, recursive=False).scan()
        return [self.pad_one(f.path) for f in files]
