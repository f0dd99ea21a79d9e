"""Build and runtime version information."""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass

VERSION = ""
COMMIT = ""
BRANCH = ""


@dataclass(frozen=True)
class VersionInfo:
    """Version details of the package and the running interpreter."""

    iavl: str
    git_commit: str
    branch: str
    python_version: str

    def __str__(self) -> str:
        return (
            f"iavl: {self.iavl}\n"
            f"git commit: {self.git_commit}\n"
            f"git branch: {self.branch}\n"
            f"{self.python_version}"
        )


def get_version_info() -> VersionInfo:
    """Return version information filled from the module-level settings."""
    runtime = (
        f"python version {platform.python_version()} "
        f"{sys.platform}/{platform.machine()}\n"
    )
    return VersionInfo(VERSION, COMMIT, BRANCH, runtime)