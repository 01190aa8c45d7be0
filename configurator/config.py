"""Configurator settings.

Typed configuration for a single personalization run. All settings use
Pydantic v2 models so they are validated at construction time and can be
overridden from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class OptionalFeature(BaseModel):
    """An opt-out feature of the skeleton and the files that implement it."""

    key: str = Field(..., description="AnswerSet flag controlling this feature")
    prompt: str = Field(..., description="Yes/no question shown to the user")
    label: str = Field(..., description="Label used in the summary table")
    files: list[str] = Field(default_factory=list, description="Paths relative to the project root")
    dev_dependencies: list[str] = Field(
        default_factory=list,
        description="composer.json require-dev keys removed when declined",
    )
    scripts: list[str] = Field(
        default_factory=list,
        description="composer.json script names removed when declined",
    )


OPTIONAL_FEATURES: list[OptionalFeature] = [
    OptionalFeature(
        key="use_style_checker",
        prompt="Enable Laravel Pint?",
        label="Use Laravel/Pint",
        files=[".github/workflows/fix-php-code-style-issues.yml", "pint.json"],
        dev_dependencies=["laravel/pint"],
        scripts=["format"],
    ),
    OptionalFeature(
        key="use_dependabot",
        prompt="Enable Dependabot?",
        label="Use Dependabot",
        files=[".github/dependabot.yml", ".github/workflows/dependabot-auto-merge.yml"],
    ),
    OptionalFeature(
        key="use_changelog_workflow",
        prompt="Use automatic changelog updater workflow?",
        label="Use Auto-Changelog",
        files=[".github/workflows/update-changelog.yml"],
    ),
]


class ConfigureSettings(BaseModel):
    """Settings for one run of the skeleton configurator.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and passed to every component of the pipeline.
    """

    root: Path = Field(default_factory=Path.cwd, description="Project tree to personalize")
    script_name: str = Field(default="configure.py", description="Entry script file name")
    github_api_url: str = Field(default="https://api.github.com")
    user_agent: str = Field(default="skeleton-configure-script/1.0")
    http_timeout: float = Field(default=5.0, gt=0, description="GitHub API timeout in seconds")
    command_timeout: int = Field(default=30, ge=1, description="git/gh/grep timeout in seconds")
    excluded_dirs: list[str] = Field(default=[".git", "vendor"])
    manifest_name: str = Field(default="composer.json")
    install_command: str = Field(default="composer install && composer test")
    verbose: bool = Field(default=False, description="Print diagnostics for failed probes")

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def script_path(self) -> Path:
        """The entry script that deletes itself at the end of a run."""
        return self.root / self.script_name

    @property
    def manifest_path(self) -> Path:
        """The composer manifest edited during cleanup."""
        return self.root / self.manifest_name

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "ConfigureSettings":
        """Build settings from environment variables.

        Recognised variables (all optional):
            CONFIGURE_ROOT, CONFIGURE_SCRIPT_NAME, CONFIGURE_GITHUB_API_URL,
            CONFIGURE_HTTP_TIMEOUT, CONFIGURE_COMMAND_TIMEOUT,
            CONFIGURE_INSTALL_COMMAND, CONFIGURE_VERBOSE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CONFIGURE_ROOT"):
            kwargs["root"] = Path(os.environ["CONFIGURE_ROOT"])
        if os.environ.get("CONFIGURE_SCRIPT_NAME"):
            kwargs["script_name"] = os.environ["CONFIGURE_SCRIPT_NAME"]
        if os.environ.get("CONFIGURE_GITHUB_API_URL"):
            kwargs["github_api_url"] = os.environ["CONFIGURE_GITHUB_API_URL"]
        if os.environ.get("CONFIGURE_HTTP_TIMEOUT"):
            kwargs["http_timeout"] = float(os.environ["CONFIGURE_HTTP_TIMEOUT"])
        if os.environ.get("CONFIGURE_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["CONFIGURE_COMMAND_TIMEOUT"])
        if os.environ.get("CONFIGURE_INSTALL_COMMAND"):
            kwargs["install_command"] = os.environ["CONFIGURE_INSTALL_COMMAND"]

        verbose = os.environ.get("CONFIGURE_VERBOSE", "").strip().lower()
        kwargs["verbose"] = verbose in ("1", "true", "yes", "on")

        return cls(**kwargs)
