"""
app.py - Wires validated Settings to the DirectoryIndexer.

The App owns process-wide logging setup; the indexer itself only ever
receives a logger.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from obsidian_index.components import DirectoryIndexer, IndexSummary, WriteOptions
from obsidian_index.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(filename)s:%(lineno)d %(message)s"

logger = logging.getLogger("obsidian_index")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Route obsidian_index logs to stdout; DEBUG when verbose, INFO otherwise."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger


class App:
    """One indexing run over a single vault."""

    def __init__(self, settings: Settings, vault: Optional[Path] = None):
        self.settings = settings
        self.vault = vault if vault is not None else settings.resolve_vault_dir()
        self.log = configure_logging(settings.verbose)
        self.indexer = DirectoryIndexer(
            self.vault,
            options=WriteOptions(dry_run=settings.dry_run, backup=settings.backup),
            exclude_dirs=settings.exclude_dirs,
            log=self.log,
        )

    def run(self) -> IndexSummary:
        try:
            return self.indexer.run()
        except Exception as e:
            self.log.error("indexation failed for vault %s: %s", self.vault, e)
            raise
