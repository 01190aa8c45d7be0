"""Shared utility functions for the skeleton configurator.

Provides blocking command execution, the name normalisation helpers used to
derive slugs/namespaces/class names, and Rich-based console output.  Command
execution never raises: failures come back as a non-zero ``CommandResult``
so every caller can degrade to an empty value.
"""

from __future__ import annotations

import re
import subprocess
from pathlib import Path
from typing import NamedTuple

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Command execution
# ---------------------------------------------------------------------------


class CommandResult(NamedTuple):
    """Outcome of :func:`run_command`."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(
    cmd: str | list[str],
    cwd: str | Path | None = None,
    timeout: int = 30,
    capture: bool = True,
    env: dict[str, str] | None = None,
) -> CommandResult:
    """Run a command and wait for it to finish.

    Args:
        cmd: Shell command string or list of arguments.  A string is run
            through the shell (needed for ``&&`` chains).
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``0`` disables the timeout.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams).
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``CommandResult``.  A missing executable yields return code 127 and
        a timeout yields -1; neither raises.
    """
    import os

    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    display = cmd if isinstance(cmd, str) else " ".join(cmd)

    try:
        completed = subprocess.run(  # nosec B603
            cmd,
            shell=isinstance(cmd, str),
            cwd=str(cwd) if cwd else None,
            env=merged_env,
            capture_output=capture,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout or None,
        )
    except FileNotFoundError:
        return CommandResult(127, "", f"Command not found: {display}")
    except subprocess.TimeoutExpired:
        return CommandResult(-1, "", f"Command timed out after {timeout}s: {display}")
    except OSError as exc:
        return CommandResult(126, "", f"Could not run {display}: {exc}")

    return CommandResult(
        completed.returncode,
        (completed.stdout or "").strip(),
        (completed.stderr or "").strip(),
    )


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def slugify(subject: str) -> str:
    """Convert a display name to a lowercase, hyphen-separated slug.

    Every run of characters outside ``[A-Za-z0-9-]`` becomes a single hyphen,
    then leading/trailing hyphens are trimmed.  Existing hyphen runs are kept
    as they are, so the function is idempotent.

    Examples::

        slugify("Acme Toolkit!") -> "acme-toolkit"
        slugify("  --x y--  ")   -> "x-y"
    """
    return re.sub(r"[^A-Za-z0-9-]+", "-", subject).strip("-").lower()


def ucwords(subject: str) -> str:
    """Uppercase the first character of each whitespace-delimited word.

    The rest of each word is left untouched (``"jetBrains"`` stays
    ``"JetBrains"``) and the whitespace itself is preserved.
    """
    return re.sub(r"(^|\s)(\S)", lambda m: m.group(1) + m.group(2).upper(), subject)


def title_case(subject: str) -> str:
    """Convert ``some-package_name here`` to ``SomePackageNameHere``."""
    spaced = subject.replace("-", " ").replace("_", " ")
    return "".join(ucwords(spaced).split())


def namespace_case(subject: str) -> str:
    """Derive a vendor namespace: hyphens dropped, words capitalised and joined."""
    return "".join(ucwords(subject.replace("-", "")).split())


def title_snake(subject: str, replace: str = "_") -> str:
    """Replace hyphens and underscores with *replace*."""
    return subject.replace("-", replace).replace("_", replace)


def lcfirst(subject: str) -> str:
    """Lowercase only the first character."""
    return subject[:1].lower() + subject[1:]


def remove_prefix(prefix: str, content: str) -> str:
    """Strip *prefix* from the start of *content* when present."""
    if content.startswith(prefix):
        return content[len(prefix):]
    return content


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str) -> None:
    """Print a full-width rule with a title."""
    console.print()
    console.print(Rule(f"[bold bright_cyan]{title}[/bold bright_cyan]", style="bright_cyan"))


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, escape(str(value)))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_note(message: str, verbose: bool = True) -> None:
    """Print a dim diagnostic line when *verbose* is set."""
    if verbose:
        console.print(f"[dim]{escape(message)}[/dim]", highlight=False)
