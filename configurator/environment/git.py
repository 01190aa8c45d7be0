"""Read-only access to the local git configuration and history.

Every helper degrades to an empty value when git is missing, the directory
is not a repository or the key is unset.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, Field

from ..utils import run_command


class GitIdentity(BaseModel):
    """Author details and remote URL read from ``git config``."""

    author_name: str = Field(default="")
    author_email: str = Field(default="")
    remote_url: str = Field(default="")


def git_config(key: str, cwd: str | Path | None = None, timeout: int = 30) -> str:
    """Return the value of a git config *key*, or ``""`` if it is unavailable."""
    result = run_command(["git", "config", key], cwd=cwd, timeout=timeout)
    if not result.ok:
        return ""
    return result.stdout


def probe_git_identity(cwd: str | Path | None = None, timeout: int = 30) -> GitIdentity:
    """Read ``user.name``, ``user.email`` and ``remote.origin.url``."""
    return GitIdentity(
        author_name=git_config("user.name", cwd=cwd, timeout=timeout),
        author_email=git_config("user.email", cwd=cwd, timeout=timeout),
        remote_url=git_config("remote.origin.url", cwd=cwd, timeout=timeout),
    )


def noreply_committers(cwd: str | Path | None = None, timeout: int = 30) -> list[tuple[str, str]]:
    """List ``(name, email)`` of commits authored with a GitHub noreply address.

    Commits are returned oldest first.  An unavailable history gives ``[]``.
    """
    result = run_command(
        [
            "git",
            "log",
            "--author=@users.noreply.github.com",
            "--pretty=%an:%ae",
            "--reverse",
        ],
        cwd=cwd,
        timeout=timeout,
    )
    if not result.ok:
        return []

    committers: list[tuple[str, str]] = []
    for line in result.stdout.splitlines():
        line = line.strip()
        if not line:
            continue
        # Emails never contain ':', names might.
        name, _, email = line.rpartition(":")
        committers.append((name, email))
    return committers


def remote_owner(remote_url: str) -> str:
    """Return the owner segment that follows the host in a remote URL.

    Handles both SSH (``git@github.com:owner/repo.git``) and HTTPS
    (``https://github.com/owner/repo.git``) remotes.  Returns ``""`` when the
    URL has no such segment.

    Examples::

        remote_owner("git@github.com:spatie/skeleton.git")   -> "spatie"
        remote_owner("https://github.com/spatie/skeleton")   -> "spatie"
    """
    url = re.sub(r"^[A-Za-z][A-Za-z0-9+.-]*://", "", remote_url.strip())
    parts = [part for part in url.replace(":", "/").split("/") if part]
    # parts[0] is the host; an ssh:// URL may carry a port right after it.
    segments = parts[1:]
    if segments and segments[0].isdigit():
        segments = segments[1:]
    return segments[0] if segments else ""
