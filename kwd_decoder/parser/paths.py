"""Companion file path handling.

Paths in the level path table were authored on a case-insensitive file
system, with backslash separators and sometimes without an extension.
"""
from pathlib import Path
from typing import Union
import logging
import os

from .constants import DEFAULT_EXTENSION

logger = logging.getLogger(__name__)


def fix_path(path: str) -> str:
    """Normalize a path table entry.

    Backslashes become forward slashes and a path without a 3 character
    extension gets the default one.
    """
    path = path.replace('\\', '/')
    if len(path) < 4 or path[-4] != '.':
        path += DEFAULT_EXTENSION
    return path


def resolve_real_file_name(base_path: Union[str, Path], path: str) -> Path:
    """Resolve a relative path against base_path ignoring case.

    Every segment is matched against the directory listing. A segment with
    no match is kept as written, so opening the result fails normally.

    Args:
        base_path: Game root directory
        path: Relative path using '/' or '\\' separators

    Returns:
        The resolved path
    """
    current = Path(base_path)
    for segment in path.replace('\\', '/').split('/'):
        if not segment or segment == '.':
            continue
        candidate = current / segment
        if not candidate.exists() and current.is_dir():
            wanted = segment.lower()
            for entry in os.listdir(current):
                if entry.lower() == wanted:
                    candidate = current / entry
                    break
        current = candidate
    logger.debug(f"Resolved {path} to {current}")
    return current
