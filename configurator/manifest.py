"""composer.json editing.

The manifest is rewritten the way composer itself writes it: four-space
indentation, slashes and non-ASCII characters left unescaped, key order
preserved.  A missing manifest is a no-op; a malformed one raises
``ManifestError`` because nothing sensible can be written back.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .exceptions import ManifestError


def load_manifest(path: str | Path) -> dict[str, Any]:
    """Load and parse a composer manifest.

    Raises:
        FileNotFoundError: If the file does not exist.
        ManifestError: If the file is not a JSON object.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestError(file_path, f"invalid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise ManifestError(file_path, "expected a JSON object at the top level")
    return data


def save_manifest(data: dict[str, Any], path: str | Path, trailing_newline: bool = True) -> None:
    """Write *data* back as pretty-printed JSON."""
    content = json.dumps(data, indent=4, ensure_ascii=False)
    if trailing_newline:
        content += "\n"
    Path(path).write_text(content, encoding="utf-8")


class ComposerManifest:
    """Removes dependencies and scripts from a ``composer.json`` file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def _edit(self, section: str, keys: list[str]) -> list[str]:
        if not self.exists():
            return []

        trailing_newline = self.path.read_text(encoding="utf-8").endswith("\n")
        data = load_manifest(self.path)
        entries = data.get(section)
        if not isinstance(entries, dict):
            return []

        removed = [key for key in keys if key in entries]
        if not removed:
            return []
        for key in removed:
            del entries[key]
        save_manifest(data, self.path, trailing_newline=trailing_newline)
        return removed

    def remove_dev_dependencies(self, names: list[str]) -> list[str]:
        """Drop ``require-dev`` entries by exact package name.

        Returns:
            The names that were present and removed.
        """
        return self._edit("require-dev", names)

    def remove_script(self, script_name: str) -> bool:
        """Drop a ``scripts`` entry by exact name."""
        return bool(self._edit("scripts", [script_name]))
