"""
Command-line entry point.

Usage:
    obsidian-index init [--dir VAULT] [--verbose] [--dry-run] [--backup]
                        [--exclude NAME[,NAME...]]
    obsidian-index --version
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from obsidian_index.app import App
from obsidian_index.config import Settings
from obsidian_index.errors import ConfigError, IndexationError
from obsidian_index.version import version_string


def split_excludes(values: Optional[List[str]]) -> List[str]:
    """Flatten repeated and comma-separated --exclude values."""
    names: List[str] = []
    for value in values or []:
        names.extend(value.split(","))
    return names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="obsidian-index",
        description=(
            "Create index files for an Obsidian vault: every directory gets a "
            "markdown file linking to its entries, processed from leaves to root."
        ),
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Print version information"
    )
    subparsers = parser.add_subparsers(dest="command")

    init = subparsers.add_parser(
        "init",
        help="Index an Obsidian vault",
        description=(
            "Index all directories of the vault, starting from the deepest "
            "level and working up to the root. Each directory gets an index "
            "file named after it containing links to its files and indexed "
            "subdirectories. Existing index files are left untouched."
        ),
    )
    init.add_argument(
        "-d",
        "--dir",
        metavar="VAULT",
        default=None,
        help="Path to the vault directory (default: current directory)",
    )
    init.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    init.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be done without creating files",
    )
    init.add_argument(
        "--backup", action="store_true", help="Back up existing index files before writing"
    )
    init.add_argument(
        "--exclude",
        action="append",
        metavar="NAME",
        help="Directories to exclude (repeatable, comma-separated)",
    )
    return parser


def run_init(args: argparse.Namespace) -> int:
    try:
        settings = Settings(
            vault_dir=args.dir,
            verbose=args.verbose,
            dry_run=args.dry_run,
            backup=args.backup,
            exclude_dirs=split_excludes(args.exclude),
        )
        vault = settings.validate_vault()
    except (ValidationError, ConfigError) as e:
        print(f"Error: configuration validation failed: {e}", file=sys.stderr)
        return 1

    if settings.verbose:
        print(f"Starting indexation of vault: {vault}")
        if settings.dry_run:
            print("DRY RUN MODE - no files will be created")
        if settings.backup:
            print("BACKUP MODE - existing index files will be backed up")
        if settings.exclude_dirs:
            print(f"Excluding directories: {', '.join(settings.exclude_dirs)}")

    try:
        App(settings, vault=vault).run()
    except IndexationError as e:
        print(f"Error: indexation failed: {e}", file=sys.stderr)
        return 1

    if settings.dry_run:
        print(f"Dry run completed for vault: {vault}")
    else:
        print(f"Successfully indexed vault: {vault}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(version_string())
        return 0

    if args.command == "init":
        return run_init(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
