"""Small helpers for the project's folder and file handling."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def create_folder(folder_name: PathLike) -> bool:
    """Create ``folder_name`` under the current directory.

    Returns True if it was created, False if it already existed. A missing
    parent directory raises FileNotFoundError.
    """
    folder_path = Path.cwd() / folder_name
    try:
        folder_path.mkdir()
    except FileExistsError:
        return False
    logger.info("folder created: %s", folder_path)
    return True


def read_file(file_name: PathLike) -> str:
    """Return the text of ``file_name``; OSError if it cannot be opened."""
    with open(file_name, encoding="utf-8") as handle:
        text = handle.read()
    for line in text.splitlines():
        logger.debug("%s", line)
    return text


def write_file(file_name: PathLike, text: str) -> None:
    """Replace the contents of ``file_name`` with ``text``; OSError if it cannot be opened."""
    with open(file_name, "w", encoding="utf-8") as handle:
        handle.write(text)
    logger.info("file written: %s", file_name)