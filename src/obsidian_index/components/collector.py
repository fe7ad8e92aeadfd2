import logging
import os
from typing import Iterable, Optional

from obsidian_index.errors import CollectionError

from .models import ROOT_TOKEN

logger = logging.getLogger(__name__)


def should_exclude(directory: str, patterns: Iterable[str]) -> bool:
    """
    Return True when *directory* matches any exclusion pattern.

    A pattern matches when it is a substring of the relative path or equals
    the directory's base name exactly. Substring matching means ``arch``
    also excludes ``archive`` and ``research/archived``.
    """
    name = directory.rsplit("/", 1)[-1]
    for pattern in patterns:
        if pattern in directory or name == pattern:
            return True
    return False


def collect_directories(
    vault_root: str,
    exclude_dirs: Iterable[str] = (),
    log: Optional[logging.Logger] = None,
) -> list[str]:
    """
    Walk the vault once and return every directory that should be indexed.

    Args:
        vault_root:   Absolute path to the vault.
        exclude_dirs: Name / substring patterns of directories to skip.
        log:          Logger for diagnostics; defaults to the module logger.

    Returns:
        Directory paths relative to the vault with ``/`` separators, in
        depth-first traversal order. The root is reported as ``"."``.

    Raises:
        CollectionError: A directory could not be listed for a reason other
            than missing permissions.
    """
    log = log or logger
    root = os.path.abspath(vault_root)
    patterns = tuple(exclude_dirs)
    directories: list[str] = []

    def _walk(current_path: str, rel_path: str) -> None:
        try:
            with os.scandir(current_path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except PermissionError as e:
            log.warning("permission denied, skipping %s: %s", rel_path, e)
            return
        except OSError as e:
            log.error("error walking directory %s: %s", rel_path, e)
            raise CollectionError(rel_path, e) from e

        directories.append(rel_path)

        for entry in entries:
            if not entry.is_dir(follow_symlinks=False):
                continue
            if entry.name.startswith("."):
                continue
            child_rel = entry.name if rel_path == ROOT_TOKEN else f"{rel_path}/{entry.name}"
            if should_exclude(child_rel, patterns):
                log.debug("excluded directory %s", child_rel)
                continue
            _walk(entry.path, child_rel)

    _walk(root, ROOT_TOKEN)
    return directories
