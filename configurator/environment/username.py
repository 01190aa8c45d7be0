"""GitHub username inference.

Three strategies are tried in order and the first non-empty answer wins:

1. commits authored with a ``@users.noreply.github.com`` address whose
   author name matches the configured ``user.name``;
2. the login reported by an authenticated ``gh`` CLI session;
3. the owner segment of ``remote.origin.url``.

None of them raise; an unresolved username is ``""``.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path

from ..utils import print_note, run_command
from .git import git_config, noreply_committers, remote_owner

_GH_LOGIN_RE = re.compile(
    r"ogged in to github\.com (?:as|account) ([A-Za-z0-9_-]+)"
)
_NOREPLY_ID_PREFIX_RE = re.compile(r"^\d+\+")


def username_from_commits(cwd: str | Path | None = None, timeout: int = 30) -> str:
    """Find the author's login in noreply commit emails, oldest commit first."""
    author_name = git_config("user.name", cwd=cwd, timeout=timeout).strip().lower()
    if not author_name:
        return ""

    for name, email in noreply_committers(cwd=cwd, timeout=timeout):
        if name.lower() != author_name or "[bot]" in name:
            continue
        local_part = email.split("@", 1)[0]
        # Newer noreply addresses look like 12345+login@users.noreply.github.com
        return _NOREPLY_ID_PREFIX_RE.sub("", local_part)
    return ""


def username_from_gh_cli(cwd: str | Path | None = None, timeout: int = 30) -> str:
    """Parse the login out of ``gh auth status``."""
    result = run_command(
        ["gh", "auth", "status", "-h", "github.com"],
        cwd=cwd,
        timeout=timeout,
    )
    # gh has written the status to stderr in some releases, stdout in others.
    match = _GH_LOGIN_RE.search(f"{result.stdout}\n{result.stderr}")
    if match is None:
        return ""
    return match.group(1)


def username_from_remote(cwd: str | Path | None = None, timeout: int = 30) -> str:
    """Use the remote owner as a last-resort username."""
    return remote_owner(git_config("remote.origin.url", cwd=cwd, timeout=timeout))


class UsernameGuesser:
    """Runs the username strategies in priority order."""

    def __init__(
        self,
        cwd: str | Path | None = None,
        timeout: int = 30,
        strategies: list[tuple[str, Callable[..., str]]] | None = None,
        verbose: bool = False,
    ) -> None:
        self.cwd = cwd
        self.timeout = timeout
        self.verbose = verbose
        self.strategies = strategies if strategies is not None else [
            ("commit history", username_from_commits),
            ("gh auth status", username_from_gh_cli),
            ("git remote", username_from_remote),
        ]

    def guess(self) -> str:
        """Return the first non-empty strategy result, or ``""``."""
        for label, strategy in self.strategies:
            username = strategy(cwd=self.cwd, timeout=self.timeout)
            if username:
                print_note(f"Username '{username}' found via {label}", self.verbose)
                return username
            print_note(f"No username found via {label}", self.verbose)
        return ""
