import logging
from pathlib import Path
from typing import Iterable, Set

import pytest


def make_files(root: Path, rel_paths: Iterable[str]) -> None:
    for rel in sorted(rel_paths):
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(rel, encoding="utf-8")


def file_names(directory: Path) -> Set[str]:
    return {p.name for p in directory.iterdir() if p.is_file()}


@pytest.fixture
def src(tmp_path: Path) -> Path:
    d = tmp_path / "src"
    d.mkdir()
    return d


@pytest.fixture
def dest(tmp_path: Path) -> Path:
    d = tmp_path / "dest"
    d.mkdir()
    return d


@pytest.fixture(autouse=True)
def reset_flatpad_logger():
    yield
    logger = logging.getLogger("flatpad")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
