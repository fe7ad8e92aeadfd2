import os
import platform
from importlib.metadata import PackageNotFoundError, version

from pydantic import BaseModel

DISTRIBUTION = "obsidian-index"


class VersionInfo(BaseModel):
    version: str
    git_commit: str
    build_date: str
    python_version: str


def get_version_info() -> VersionInfo:
    try:
        current = version(DISTRIBUTION)
    except PackageNotFoundError:
        current = "dev"
    return VersionInfo(
        version=current,
        git_commit=os.environ.get("OBSIDIAN_INDEX_GIT_COMMIT", "unknown"),
        build_date=os.environ.get("OBSIDIAN_INDEX_BUILD_DATE", "unknown"),
        python_version=platform.python_version(),
    )


def version_string() -> str:
    info = get_version_info()
    return (
        f"{DISTRIBUTION} version {info.version}\n"
        f"  Git commit: {info.git_commit}\n"
        f"  Build date: {info.build_date}\n"
        f"  Python version: {info.python_version}"
    )
