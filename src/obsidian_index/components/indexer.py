"""
DirectoryIndexer - builds a navigable index for every directory of a vault.

For each directory a markdown file named after it is written inside it:

    notes/
    ├── file1.md
    ├── notes.md              <- [[notes/file1.md]]
    └── subfolder/                [[notes/subfolder/subfolder.md]]
        ├── file3.md
        └── subfolder.md      <- [[notes/subfolder/file3.md]]

Directories are processed deepest first, so by the time a parent is
indexed its children's index files already exist on disk. A child
directory is linked only when it has an index of its own, which keeps
empty subtrees out of their parents' indexes. Existing index files are
never rewritten; running twice only fills gaps.

Usage (library):
    from obsidian_index import DirectoryIndexer
    summary = DirectoryIndexer("/path/to/vault").run()
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from obsidian_index.errors import DirectoryReadError

from .collector import collect_directories, should_exclude
from .models import (
    ROOT_TOKEN,
    DirectoryEntry,
    DirectoryResult,
    EntryKind,
    IndexOutcome,
    IndexSummary,
    WriteOptions,
    format_link,
    index_name_for,
    path_depth,
)
from .writer import IndexWriter

logger = logging.getLogger(__name__)


class DirectoryIndexer:
    """Collects a vault's directories and writes their index files leaves-first."""

    def __init__(
        self,
        vault_root: str | Path,
        options: Optional[WriteOptions] = None,
        exclude_dirs: Iterable[str] = (),
        log: Optional[logging.Logger] = None,
    ) -> None:
        self.vault_root = os.path.abspath(vault_root)
        self.options = options or WriteOptions()
        self.exclude_dirs = tuple(exclude_dirs)
        self.log = log or logger
        self.writer = IndexWriter(self.options, log=self.log)
        self._outcomes: Dict[str, IndexOutcome] = {}

    # ------------------------------------------------------------------
    # Orchestration
    # ------------------------------------------------------------------

    def collect(self) -> List[str]:
        return collect_directories(self.vault_root, self.exclude_dirs, log=self.log)

    @staticmethod
    def order(directories: Iterable[str]) -> List[str]:
        """Deepest directories first; equal depths keep their incoming order."""
        return sorted(directories, key=path_depth, reverse=True)

    def run(self, directories: Optional[Iterable[str]] = None) -> IndexSummary:
        """
        Index every directory, leaves to root.

        Args:
            directories: Vault-relative directory paths to index. When
                omitted the vault is walked with :func:`collect_directories`.

        Returns:
            An IndexSummary with one result per directory, in processing order.

        Raises:
            IndexationError: The first directory that fails aborts the run.
        """
        if directories is None:
            try:
                directories = self.collect()
            except Exception as e:
                self.log.error("failed to collect directories: %s", e)
                raise

        self._outcomes = {}
        summary = IndexSummary()
        for directory in self.order(directories):
            try:
                result = self.index_directory(directory)
            except Exception as e:
                self.log.error("failed to index directory %s: %s", directory, e)
                raise
            summary.results.append(result)

        self.log.debug(
            "indexed %d directories: %d created, %d planned, %d existing, %d empty",
            len(summary.results),
            summary.created,
            summary.planned,
            summary.existing,
            summary.empty,
        )
        return summary

    # ------------------------------------------------------------------
    # Per-directory logic
    # ------------------------------------------------------------------

    def index_directory(self, directory: str) -> DirectoryResult:
        """Assemble links for one directory and write its index if it has none."""
        full_path = self.full_path(directory)
        index_path = full_path / index_name_for(directory)

        links = [format_link(target) for target in self.link_targets(directory)]
        if not links:
            self.log.debug("nothing to index in %s", directory)
            result = DirectoryResult(directory=directory, outcome=IndexOutcome.EMPTY)
        elif index_path.exists():
            self.log.debug("index already exists, skipping %s", index_path)
            result = DirectoryResult(
                directory=directory,
                outcome=IndexOutcome.EXISTING,
                index_path=index_path,
            )
        else:
            result = DirectoryResult(
                directory=directory,
                outcome=self.writer.write(index_path, links),
                index_path=index_path,
                links=links,
            )

        self._outcomes[directory] = result.outcome
        return result

    def link_targets(self, directory: str) -> List[str]:
        """Vault-relative paths the directory's index should link to, in entry order."""
        targets: List[str] = []
        for entry in self.list_entries(directory):
            if self.is_index_file(entry.name, directory):
                continue
            if entry.is_directory:
                child = entry.name if directory == ROOT_TOKEN else f"{directory}/{entry.name}"
                child_index = entry.full_path / index_name_for(child)
                if self.has_index(child, child_index):
                    targets.append(self.relative_link(child_index))
            else:
                targets.append(self.relative_link(entry.full_path))
        return targets

    def has_index(self, child: str, child_index: Path) -> bool:
        """
        Whether a subdirectory contributes a link to its parent.

        Hidden and excluded directories never do. A child indexed earlier in
        this run contributes unless it had nothing to link (a stray index
        file alone does not count); a planned dry-run index counts as
        present. Children outside this run fall back to an existence check.
        """
        if child.rsplit("/", 1)[-1].startswith(".") or should_exclude(child, self.exclude_dirs):
            return False
        outcome = self._outcomes.get(child)
        if outcome is not None:
            return outcome != IndexOutcome.EMPTY
        return child_index.exists()

    def list_entries(self, directory: str) -> List[DirectoryEntry]:
        full_path = self.full_path(directory)
        try:
            with os.scandir(full_path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise DirectoryReadError(directory, e) from e

        return [
            DirectoryEntry(
                name=entry.name,
                full_path=Path(entry.path),
                kind=EntryKind.DIRECTORY if entry.is_dir(follow_symlinks=False) else EntryKind.FILE,
            )
            for entry in entries
        ]

    # ------------------------------------------------------------------
    # Path helpers
    # ------------------------------------------------------------------

    def full_path(self, directory: str) -> Path:
        if directory in (ROOT_TOKEN, ""):
            return Path(self.vault_root)
        return Path(self.vault_root, *directory.split("/"))

    def relative_link(self, path: str | Path) -> str:
        """Path relative to the vault root, always with ``/`` separators."""
        rel = os.path.relpath(os.path.abspath(path), self.vault_root)
        return rel.replace(os.sep, "/")

    def is_index_file(self, entry_name: str, directory: str) -> bool:
        return entry_name == index_name_for(directory)


def index_vault(
    vault_root: str | Path,
    dry_run: bool = False,
    backup: bool = False,
    exclude_dirs: Iterable[str] = (),
    log: Optional[logging.Logger] = None,
) -> IndexSummary:
    """Index *vault_root* in one call. See :class:`DirectoryIndexer`."""
    indexer = DirectoryIndexer(
        vault_root,
        options=WriteOptions(dry_run=dry_run, backup=backup),
        exclude_dirs=exclude_dirs,
        log=log,
    )
    return indexer.run()
