"""obsidian-index: leaves-to-root index files for Obsidian vaults."""

from obsidian_index.components import (
    DirectoryIndexer,
    IndexOutcome,
    IndexSummary,
    WriteOptions,
    collect_directories,
    index_vault,
)
from obsidian_index.errors import (
    CollectionError,
    ConfigError,
    DirectoryReadError,
    IndexationError,
    IndexWriteError,
)

__all__ = [
    "CollectionError",
    "ConfigError",
    "DirectoryIndexer",
    "DirectoryReadError",
    "IndexOutcome",
    "IndexSummary",
    "IndexWriteError",
    "IndexationError",
    "WriteOptions",
    "collect_directories",
    "index_vault",
]
