import os
import stat
from pathlib import Path
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from obsidian_index.errors import ConfigError


class Settings(BaseSettings):
    """Run settings, from CLI flags or OBSIDIAN_INDEX_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OBSIDIAN_INDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    vault_dir: Optional[Path] = None
    verbose: bool = False
    dry_run: bool = False
    backup: bool = False
    exclude_dirs: List[str] = []

    @field_validator("exclude_dirs")
    @classmethod
    def exclude_dirs_not_blank(cls, v: List[str]) -> List[str]:
        cleaned = []
        for name in v:
            stripped = name.strip()
            if not stripped:
                raise ValueError("exclude directory cannot be empty")
            cleaned.append(stripped)
        return cleaned

    def resolve_vault_dir(self) -> Path:
        """The configured vault, or the current directory, as an absolute path."""
        if self.vault_dir is None or str(self.vault_dir) == "":
            return Path.cwd()
        return Path(os.path.abspath(self.vault_dir))

    def validate_vault(self, vault: Optional[Path] = None) -> Path:
        """
        Check that the vault exists, is a directory and is absolute.
        Returns the validated path.

        Raises:
            ConfigError: with a message naming the offending path.
        """
        vault = vault if vault is not None else self.resolve_vault_dir()
        if str(vault) == "":
            raise ConfigError("vault directory is required")
        try:
            st = vault.stat()
        except FileNotFoundError as e:
            raise ConfigError(f"vault directory does not exist: {vault}") from e
        except OSError as e:
            raise ConfigError(f"cannot access vault directory: {e}") from e

        if not stat.S_ISDIR(st.st_mode):
            raise ConfigError(f"vault path is not a directory: {vault}")
        if not vault.is_absolute():
            raise ConfigError(f"vault directory must be an absolute path: {vault}")
        return vault
