"""Shared pytest fixtures for the skeleton configurator test suite.

Provides reusable fixtures for:
- A real temporary git repository with configured identity and remote
- A fresh copy of the fixture package skeleton
- Scripted terminal input for the prompt layer
- A fully resolved AnswerSet
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

from configurator.answers import AnswerSet
from configurator.config import ConfigureSettings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

def _git(repo_dir: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo_dir, check=True, capture_output=True)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Temporary git repository with an initial commit.

    The repo has ``user.name``/``user.email`` set and an SSH-style origin
    remote so the probes have something real to read.
    """
    repo_dir = tmp_path / "test-repo"
    repo_dir.mkdir()
    _git(repo_dir, "init")
    _git(repo_dir, "config", "user.email", "jane@example.com")
    _git(repo_dir, "config", "user.name", "Jane Doe")
    _git(repo_dir, "config", "commit.gpgsign", "false")
    _git(repo_dir, "remote", "add", "origin", "git@github.com:acme-org/laravel-acme-toolkit.git")
    readme = repo_dir / "README.md"
    readme.write_text("# Test Project\n", encoding="utf-8")
    _git(repo_dir, "add", ".")
    _git(repo_dir, "commit", "-m", "Initial commit")
    yield repo_dir


@pytest.fixture
def skeleton_dir(tmp_path: Path) -> Path:
    """A writable copy of ``tests/fixtures/skeleton`` named like a package."""
    target = tmp_path / "laravel-acme-toolkit"
    shutil.copytree(FIXTURES_DIR / "skeleton", target)
    yield target


@pytest.fixture
def skeleton_settings(skeleton_dir: Path) -> ConfigureSettings:
    return ConfigureSettings(root=skeleton_dir)


# ---------------------------------------------------------------------------
# Prompt input
# ---------------------------------------------------------------------------

class ScriptedInput:
    """Callable stand-in for ``input`` that replays canned answers."""

    def __init__(self, answers: list[str]) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {prompt!r}")
        return self.answers.pop(0)


@pytest.fixture
def scripted_input() -> Callable[[list[str]], ScriptedInput]:
    """Factory: ``scripted_input(["a", "", "y"])``."""
    return ScriptedInput


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_answers() -> AnswerSet:
    """Answers for the ``laravel-acme-toolkit`` package by Acme Org."""
    return AnswerSet(
        author_name="Jane Doe",
        author_username="janedoe",
        author_email="jane@example.com",
        vendor_name="Acme Org",
        vendor_username="acme-org",
        vendor_slug="acme-org",
        vendor_namespace="AcmeOrg",
        package_name="laravel-acme-toolkit",
        package_slug="laravel-acme-toolkit",
        package_slug_without_prefix="acme-toolkit",
        class_name="LaravelAcmeToolkit",
        variable_name="laravelAcmeToolkit",
        description="Tools for Acme",
        use_style_checker=True,
        use_dependabot=True,
        use_changelog_workflow=True,
    )
