from .collector import collect_directories, should_exclude
from .indexer import DirectoryIndexer, index_vault
from .models import (
    ROOT_TOKEN,
    DirectoryEntry,
    DirectoryResult,
    EntryKind,
    IndexOutcome,
    IndexSummary,
    WriteOptions,
)
from .writer import IndexWriter

__all__ = [
    "ROOT_TOKEN",
    "DirectoryEntry",
    "DirectoryIndexer",
    "DirectoryResult",
    "EntryKind",
    "IndexOutcome",
    "IndexSummary",
    "IndexWriter",
    "WriteOptions",
    "collect_directories",
    "index_vault",
    "should_exclude",
]
