"""Candidate file discovery.

Finds every file in the project tree that mentions at least one placeholder
token.  Two interchangeable strategies implement the ``FileDiscovery``
protocol:

* ``GrepFileDiscovery`` shells out to ``grep`` (POSIX hosts).
* ``WalkFileDiscovery`` walks the tree and filters files line by line
  (Windows, where no grep is available).

Both skip version-control/dependency directories and the entry script, and
both report "nothing found" as an empty set.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Protocol

from .config import ConfigureSettings
from .exceptions import DiscoveryError
from .utils import run_command

SEARCH_TOKENS: list[str] = [
    ":author",
    ":vendor",
    ":package",
    "VendorName",
    "skeleton",
    "migration_table_name",
    "vendor_name",
    "vendor_slug",
    "author@domain.com",
]


class FileDiscovery(Protocol):
    def discover(self) -> set[Path]:
        ...


def _is_excluded(path: Path, root: Path, excluded_dirs: list[str], script_name: str) -> bool:
    relative = path.relative_to(root)
    if relative.name == script_name:
        return True
    return any(part in excluded_dirs for part in relative.parts[:-1])


# ---------------------------------------------------------------------------
# grep
# ---------------------------------------------------------------------------


class GrepFileDiscovery:
    """Recursive case-insensitive ``grep`` over the project tree.

    Searches the non-hidden entries of the root plus ``.github``; other dot
    directories at the root are not part of the skeleton.
    """

    def __init__(
        self,
        root: Path,
        script_name: str,
        excluded_dirs: list[str] | None = None,
        tokens: list[str] | None = None,
        timeout: int = 30,
    ) -> None:
        self.root = Path(root)
        self.script_name = script_name
        self.excluded_dirs = excluded_dirs if excluded_dirs is not None else [".git", "vendor"]
        self.tokens = tokens or SEARCH_TOKENS
        self.timeout = timeout

    def _targets(self) -> list[str]:
        targets = sorted(p.name for p in self.root.iterdir() if not p.name.startswith("."))
        if (self.root / ".github").exists():
            targets.append(".github")
        return targets

    def command(self) -> list[str]:
        pattern = "|".join(self.tokens)
        excludes = [f"--exclude-dir={name}" for name in self.excluded_dirs]
        return ["grep", "-E", "-r", "-l", "-i", pattern, *excludes, "--", *self._targets()]

    def discover(self) -> set[Path]:
        if not self._targets():
            return set()

        cmd = self.command()
        result = run_command(cmd, cwd=self.root, timeout=self.timeout)
        # grep: 0 = matches, 1 = no matches, >1 = error (possibly with partial output)
        if result.returncode not in (0, 1) and not result.stdout:
            raise DiscoveryError(
                f"File search failed (exit {result.returncode}): {result.stderr}",
                command=" ".join(cmd),
                stderr=result.stderr,
            )

        found: set[Path] = set()
        for line in result.stdout.splitlines():
            line = line.strip()
            if not line:
                continue
            path = self.root / line
            if not _is_excluded(path, self.root, self.excluded_dirs, self.script_name):
                found.add(path)
        return found


# ---------------------------------------------------------------------------
# Directory walk
# ---------------------------------------------------------------------------


class WalkFileDiscovery:
    """Enumerate the tree and keep files with a line that contains a token.

    Covers the same entries as ``GrepFileDiscovery``: root-level dot entries
    other than ``.github`` are skipped.
    """

    def __init__(
        self,
        root: Path,
        script_name: str,
        excluded_dirs: list[str] | None = None,
        tokens: list[str] | None = None,
    ) -> None:
        self.root = Path(root)
        self.script_name = script_name
        self.excluded_dirs = excluded_dirs if excluded_dirs is not None else [".git", "vendor"]
        self.tokens = [token.lower() for token in (tokens or SEARCH_TOKENS)]

    def _matches(self, path: Path) -> bool:
        try:
            with path.open(encoding="utf-8", errors="ignore") as handle:
                for line in handle:
                    lowered = line.lower()
                    if any(token in lowered for token in self.tokens):
                        return True
        except OSError:
            return False
        return False

    def discover(self) -> set[Path]:
        found: set[Path] = set()
        for path in self.root.rglob("*"):
            if not path.is_file():
                continue
            if _is_excluded(path, self.root, self.excluded_dirs, self.script_name):
                continue
            top = path.relative_to(self.root).parts[0]
            if top.startswith(".") and top != ".github":
                continue
            if self._matches(path):
                found.add(path)
        return found


def select_discovery(settings: ConfigureSettings, platform: str | None = None) -> FileDiscovery:
    """Pick the discovery strategy for the host platform."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return WalkFileDiscovery(
            settings.root,
            settings.script_name,
            excluded_dirs=settings.excluded_dirs,
        )
    return GrepFileDiscovery(
        settings.root,
        settings.script_name,
        excluded_dirs=settings.excluded_dirs,
        timeout=settings.command_timeout,
    )
