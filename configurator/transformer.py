"""Token substitution and template file renaming.

Each candidate file gets one substitution pass and then, at most, one
rename rule.  The substitution is a single left-to-right scan: at every
position the longest matching token is replaced and the replacement text is
never scanned again, so ``:package_slug_without_prefix`` is not eaten by
``:package_slug`` and a replacement that happens to contain a token is left
alone.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .answers import AnswerSet
from .utils import title_snake

DELETE_REGION_RE = re.compile(r"<!--delete-->.*<!--/delete-->", re.DOTALL)


# ---------------------------------------------------------------------------
# Replacement table
# ---------------------------------------------------------------------------


class ReplacementTable:
    """Ordered mapping of literal tokens to their replacements."""

    def __init__(self, replacements: dict[str, str]) -> None:
        self.replacements = {token: value for token, value in replacements.items() if token}
        tokens = sorted(self.replacements, key=len, reverse=True)
        self._pattern = re.compile("|".join(re.escape(token) for token in tokens)) if tokens else None

    @classmethod
    def from_answers(cls, answers: AnswerSet) -> "ReplacementTable":
        return cls({
            ":author_name": answers.author_name,
            ":author_username": answers.author_username,
            "author@domain.com": answers.author_email,
            ":vendor_name": answers.vendor_name,
            ":vendor_slug": answers.vendor_slug,
            "VendorName": answers.vendor_namespace,
            ":package_name": answers.package_name,
            ":package_slug": answers.package_slug,
            ":package_slug_without_prefix": answers.package_slug_without_prefix,
            "Skeleton": answers.class_name,
            "skeleton": answers.package_slug,
            "migration_table_name": title_snake(answers.package_slug),
            "variable": answers.variable_name,
            ":package_description": answers.description,
        })

    @property
    def tokens(self) -> list[str]:
        return list(self.replacements)

    def apply(self, content: str) -> str:
        if self._pattern is None:
            return content
        return self._pattern.sub(lambda match: self.replacements[match.group(0)], content)


def _read(path: Path) -> str:
    # surrogateescape round-trips bytes that are not valid UTF-8
    return path.read_bytes().decode("utf-8", errors="surrogateescape")


def _write(path: Path, content: str) -> None:
    path.write_bytes(content.encode("utf-8", errors="surrogateescape"))


def replace_in_file(path: Path, table: ReplacementTable) -> bool:
    """Apply *table* to a file in place.

    Returns:
        ``True`` if the file content changed.  Unchanged files are not
        rewritten.
    """
    original = _read(path)
    updated = table.apply(original)
    if updated == original:
        return False
    _write(path, updated)
    return True


def remove_delete_regions(content: str) -> str:
    """Drop everything from the first ``<!--delete-->`` to the last ``<!--/delete-->``."""
    return DELETE_REGION_RE.sub("", content)


def remove_readme_paragraphs(path: Path) -> None:
    original = _read(path)
    updated = remove_delete_regions(original)
    if updated != original:
        _write(path, updated)


# ---------------------------------------------------------------------------
# Rename rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RenameRule:
    """Fires for files whose POSIX path ends with *suffix*.

    ``action`` receives the file, the project root and the answers, and
    returns the file's final location.
    """

    suffix: str
    action: Callable[[Path, Path, AnswerSet], Path]

    def matches(self, path: Path) -> bool:
        return path.as_posix().endswith(self.suffix)


def _move_to(destination: Callable[[AnswerSet], str]) -> Callable[[Path, Path, AnswerSet], Path]:
    def _action(path: Path, root: Path, answers: AnswerSet) -> Path:
        target = root / destination(answers)
        path.replace(target)
        return target

    return _action


def _strip_readme(path: Path, root: Path, answers: AnswerSet) -> Path:
    remove_readme_paragraphs(path)
    return path


RENAME_RULES: list[RenameRule] = [
    RenameRule("src/Skeleton.php", _move_to(lambda a: f"src/{a.class_name}.php")),
    RenameRule(
        "src/SkeletonServiceProvider.php",
        _move_to(lambda a: f"src/{a.class_name}ServiceProvider.php"),
    ),
    RenameRule("src/Facades/Skeleton.php", _move_to(lambda a: f"src/Facades/{a.class_name}.php")),
    RenameRule(
        "src/Commands/SkeletonCommand.php",
        _move_to(lambda a: f"src/Commands/{a.class_name}Command.php"),
    ),
    RenameRule(
        "database/migrations/create_skeleton_table.php.stub",
        _move_to(
            lambda a: f"database/migrations/create_{title_snake(a.package_slug_without_prefix)}_table.php.stub"
        ),
    ),
    RenameRule("config/skeleton.php", _move_to(lambda a: f"config/{a.package_slug_without_prefix}.php")),
    RenameRule("README.md", _strip_readme),
]


def apply_rename_rules(
    path: Path,
    root: Path,
    answers: AnswerSet,
    rules: list[RenameRule] | None = None,
) -> Path:
    """Run the first matching rule; unmatched files stay where they are."""
    for rule in rules if rules is not None else RENAME_RULES:
        if rule.matches(path):
            return rule.action(path, root, answers)
    return path


# ---------------------------------------------------------------------------
# Transformer
# ---------------------------------------------------------------------------


class Transformer:
    """Personalizes candidate files for one ``AnswerSet``."""

    def __init__(self, root: Path, answers: AnswerSet, rules: list[RenameRule] | None = None) -> None:
        self.root = Path(root)
        self.answers = answers
        self.table = ReplacementTable.from_answers(answers)
        self.rules = rules if rules is not None else RENAME_RULES

    def apply(self, path: Path) -> Path:
        """Substitute tokens in *path*, then rename it if a rule matches.

        Returns:
            Where the file ended up.
        """
        replace_in_file(path, self.table)
        return apply_rename_rules(path, self.root, self.answers, self.rules)
