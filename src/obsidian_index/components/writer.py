"""
components/writer.py - Atomic index file writes

Index files are written to a ``.tmp`` sibling and renamed into place so a
reader never observes a half-written index. Dry-run and backup modes are
handled here so the indexer only decides *what* to write.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from obsidian_index.errors import IndexWriteError

from .models import IndexOutcome, WriteOptions

logger = logging.getLogger(__name__)

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
TEMP_SUFFIX = ".tmp"


def render_index(links: List[str]) -> str:
    """One link per line, newline terminated."""
    return "\n".join(links) + "\n"


class IndexWriter:
    """Writes index files according to the run's WriteOptions."""

    def __init__(self, options: Optional[WriteOptions] = None, log: Optional[logging.Logger] = None):
        self.options = options or WriteOptions()
        self.log = log or logger

    def write(self, path: Path, links: List[str]) -> IndexOutcome:
        """
        Write *links* as the index at *path*.

        Returns IndexOutcome.PLANNED in dry-run mode (nothing touched on
        disk) and IndexOutcome.CREATED otherwise.

        Raises:
            IndexWriteError: The temporary file could not be written or
                renamed into place.
        """
        path = Path(path)
        if self.options.dry_run:
            self.log.info("DRY RUN: would create index %s (%d entries)", path, len(links))
            return IndexOutcome.PLANNED

        if self.options.backup:
            try:
                self.backup_existing(path)
            except OSError as e:
                self.log.warning("failed to back up existing file %s: %s", path, e)

        self.write_atomic(path, render_index(links))
        self.log.info("created index %s (%d entries)", path, len(links))
        return IndexOutcome.CREATED

    def backup_existing(self, path: Path) -> Optional[Path]:
        """
        Rename an existing file at *path* to ``<path>.backup_<timestamp>``.
        Returns the backup path, or None when there was nothing to back up.
        """
        path = Path(path)
        if not path.exists():
            return None
        ts = datetime.now().strftime(BACKUP_TIMESTAMP_FORMAT)
        backup_path = path.with_name(f"{path.name}.backup_{ts}")
        os.rename(path, backup_path)
        self.log.info("created backup %s -> %s", path, backup_path)
        return backup_path

    def write_atomic(self, path: Path, content: str) -> None:
        path = Path(path)
        tmp_path = path.with_name(path.name + TEMP_SUFFIX)

        try:
            tmp_path.write_text(content, encoding="utf-8")
        except OSError as e:
            self._discard(tmp_path)
            self.log.error("failed to write temporary file %s: %s", tmp_path, e)
            raise IndexWriteError(tmp_path, e) from e

        try:
            os.replace(tmp_path, path)
        except OSError as e:
            self._discard(tmp_path)
            self.log.error("failed to rename %s to %s: %s", tmp_path, path, e)
            raise IndexWriteError(path, e) from e

    def _discard(self, tmp_path: Path) -> None:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError as e:
            self.log.debug("could not remove %s: %s", tmp_path, e)
