"""Answer collection for a configuration run.

The ``PromptSession`` walks an ordered list of resolution steps.  Each step
reads the answers gathered so far, asks (or derives) one value and adds it to
the accumulator.  Once every step has run the accumulator is frozen into an
``AnswerSet``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .config import OPTIONAL_FEATURES, OptionalFeature
from .prompts import Prompter
from .utils import lcfirst, namespace_case, remove_prefix, slugify, title_case

PACKAGE_PREFIX = "laravel-"


# ---------------------------------------------------------------------------
# Answer model
# ---------------------------------------------------------------------------


class AnswerSet(BaseModel):
    """Resolved values for one personalization pass.  Immutable."""

    model_config = ConfigDict(frozen=True)

    author_name: str
    author_username: str
    author_email: str
    vendor_name: str
    vendor_username: str
    vendor_slug: str
    vendor_namespace: str
    package_name: str
    package_slug: str
    package_slug_without_prefix: str
    class_name: str
    variable_name: str
    description: str
    use_style_checker: bool = Field(default=True)
    use_dependabot: bool = Field(default=True)
    use_changelog_workflow: bool = Field(default=True)

    def feature_enabled(self, feature: OptionalFeature) -> bool:
        return bool(getattr(self, feature.key))

    def summary(self) -> dict[str, str]:
        """Human-readable rows for the confirmation table."""
        rows = {
            "Author": f"{self.author_name} ({self.author_username}, {self.author_email})",
            "Vendor": f"{self.vendor_name} ({self.vendor_slug})",
            "Vendor username": self.vendor_username,
            "Package name": self.package_name,
            "Package": f"{self.package_slug} <{self.description}>",
            "Slug without prefix": self.package_slug_without_prefix,
            "Namespace": f"{self.vendor_namespace}\\{self.class_name}",
            "Class name": self.class_name,
            "Variable name": self.variable_name,
        }
        for feature in OPTIONAL_FEATURES:
            rows[feature.label] = "yes" if self.feature_enabled(feature) else "no"
        return rows


# ---------------------------------------------------------------------------
# Prompt session
# ---------------------------------------------------------------------------

Step = tuple[str, Callable[[dict[str, Any]], Any]]


class PromptSession:
    """Asks the fixed question list and builds an ``AnswerSet``.

    Args:
        prompter: Source of user answers.
        author_name: Default author name (from ``git config user.name``).
        author_email: Default author email (from ``git config user.email``).
        folder_name: Default package name (the project directory name).
        guess_username: Called once to produce the author username default.
        guess_vendor: Called with the answered author name/username and
            returns ``(vendor_name, vendor_username)`` defaults.
    """

    def __init__(
        self,
        prompter: Prompter,
        author_name: str = "",
        author_email: str = "",
        folder_name: str = "",
        guess_username: Callable[[], str] | None = None,
        guess_vendor: Callable[[str, str], tuple[str, str]] | None = None,
    ) -> None:
        self.prompter = prompter
        self.author_name = author_name
        self.author_email = author_email
        self.folder_name = folder_name
        self.guess_username = guess_username or (lambda: "")
        self.guess_vendor = guess_vendor or (lambda name, username: (name, username))

    def steps(self) -> list[Step]:
        """The ordered resolution steps.  Keys starting with ``_`` are scratch values."""
        ask = self.prompter.ask
        confirm = self.prompter.confirm

        steps: list[Step] = [
            ("author_name", lambda a: ask("Author name", self.author_name)),
            ("author_email", lambda a: ask("Author email", self.author_email)),
            ("author_username", lambda a: ask("Author username", self.guess_username())),
            ("_vendor_guess", lambda a: self.guess_vendor(a["author_name"], a["author_username"])),
            ("vendor_name", lambda a: ask("Vendor name", a["_vendor_guess"][0])),
            (
                "vendor_username",
                lambda a: ask("Vendor username", a["_vendor_guess"][1] or slugify(a["vendor_name"])),
            ),
            ("vendor_slug", lambda a: slugify(a["vendor_username"])),
            ("vendor_namespace", lambda a: ask("Vendor namespace", namespace_case(a["vendor_name"]))),
            ("package_name", lambda a: ask("Package name", self.folder_name)),
            ("package_slug", lambda a: slugify(a["package_name"])),
            (
                "package_slug_without_prefix",
                lambda a: remove_prefix(PACKAGE_PREFIX, a["package_slug"]),
            ),
            ("class_name", lambda a: ask("Class name", title_case(a["package_name"]))),
            ("variable_name", lambda a: lcfirst(a["class_name"])),
            (
                "description",
                lambda a: ask("Package description", f"This is my package {a['package_slug']}"),
            ),
        ]
        for feature in OPTIONAL_FEATURES:
            steps.append((feature.key, lambda a, f=feature: confirm(f.prompt, True)))
        return steps

    def collect(self) -> AnswerSet:
        """Run every step in order and freeze the result."""
        answers: dict[str, Any] = {}
        for key, resolve in self.steps():
            answers[key] = resolve(answers)
        return AnswerSet(**{k: v for k, v in answers.items() if not k.startswith("_")})
