from enum import StrEnum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

ROOT_TOKEN = "."
ROOT_INDEX_NAME = "index"
INDEX_SUFFIX = ".md"


class EntryKind(StrEnum):
    FILE = "file"
    DIRECTORY = "directory"


class IndexOutcome(StrEnum):
    CREATED = "created"
    PLANNED = "planned"
    EXISTING = "existing"
    EMPTY = "empty"


class DirectoryEntry(BaseModel):
    name: str
    full_path: Path
    kind: EntryKind

    @property
    def is_directory(self) -> bool:
        return self.kind == EntryKind.DIRECTORY


class WriteOptions(BaseModel):
    dry_run: bool = False
    backup: bool = False


class DirectoryResult(BaseModel):
    directory: str
    outcome: IndexOutcome
    index_path: Optional[Path] = None
    links: List[str] = Field(default_factory=list)


class IndexSummary(BaseModel):
    results: List[DirectoryResult] = Field(default_factory=list)

    @property
    def processed_order(self) -> List[str]:
        return [r.directory for r in self.results]

    def count(self, outcome: IndexOutcome) -> int:
        return sum(1 for r in self.results if r.outcome == outcome)

    @property
    def created(self) -> int:
        return self.count(IndexOutcome.CREATED)

    @property
    def planned(self) -> int:
        return self.count(IndexOutcome.PLANNED)

    @property
    def existing(self) -> int:
        return self.count(IndexOutcome.EXISTING)

    @property
    def empty(self) -> int:
        return self.count(IndexOutcome.EMPTY)


def path_depth(directory: str) -> int:
    """Number of path segments below the vault root; the root itself is 0."""
    if directory in (ROOT_TOKEN, ""):
        return 0
    return directory.count("/") + 1


def index_name_for(directory: str) -> str:
    """File name of the index a directory gets: ``<base>.md``, or ``index.md`` at the root."""
    if directory in (ROOT_TOKEN, ""):
        return ROOT_INDEX_NAME + INDEX_SUFFIX
    return directory.rsplit("/", 1)[-1] + INDEX_SUFFIX


def format_link(relative: str) -> str:
    return f"[[{relative}]]"
