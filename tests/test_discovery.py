"""Tests for candidate file discovery (configurator.discovery).

Tests cover:
- GrepFileDiscovery against the fixture skeleton (real grep)
- GrepFileDiscovery exit-status handling (mocked)
- WalkFileDiscovery parity with grep
- Exclusions: entry script, vendor/.git, hidden root entries
- select_discovery platform selection
"""

from __future__ import annotations

import shutil
from pathlib import Path
from unittest.mock import patch

import pytest

from configurator import discovery as discovery_mod
from configurator.config import ConfigureSettings
from configurator.discovery import (
    SEARCH_TOKENS,
    GrepFileDiscovery,
    WalkFileDiscovery,
    select_discovery,
)
from configurator.exceptions import DiscoveryError
from configurator.utils import CommandResult

EXPECTED = {
    "README.md",
    "LICENSE.md",
    "composer.json",
    "config/skeleton.php",
    "database/migrations/create_skeleton_table.php.stub",
    "src/Skeleton.php",
    "src/SkeletonServiceProvider.php",
    "src/Facades/Skeleton.php",
    "src/Commands/SkeletonCommand.php",
    ".github/workflows/run-tests.yml",
}


def _relative(paths: set[Path], root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in paths}


@pytest.fixture
def noisy_skeleton(skeleton_dir: Path) -> Path:
    """Skeleton plus files that must never be reported."""
    (skeleton_dir / "vendor" / "acme").mkdir(parents=True)
    (skeleton_dir / "vendor" / "acme" / "lib.php").write_text("VendorName\\Skeleton", encoding="utf-8")
    (skeleton_dir / ".git").mkdir()
    (skeleton_dir / ".git" / "config").write_text("skeleton", encoding="utf-8")
    (skeleton_dir / ".hidden.md").write_text(":package_name", encoding="utf-8")
    (skeleton_dir / "plain.txt").write_text("nothing to see", encoding="utf-8")
    return skeleton_dir


# ---------------------------------------------------------------------------
# grep
# ---------------------------------------------------------------------------


@pytest.mark.skipif(shutil.which("grep") is None, reason="grep not installed")
class TestGrepFileDiscovery:
    @pytest.mark.integration
    def test_finds_fixture_files(self, noisy_skeleton: Path):
        found = GrepFileDiscovery(noisy_skeleton, "configure.py").discover()
        assert _relative(found, noisy_skeleton) == EXPECTED

    @pytest.mark.integration
    def test_case_insensitive(self, tmp_path: Path):
        (tmp_path / "a.txt").write_text("SKELETON", encoding="utf-8")
        found = GrepFileDiscovery(tmp_path, "configure.py").discover()
        assert _relative(found, tmp_path) == {"a.txt"}

    @pytest.mark.integration
    def test_no_matches_is_empty(self, tmp_path: Path):
        (tmp_path / "a.txt").write_text("nothing", encoding="utf-8")
        assert GrepFileDiscovery(tmp_path, "configure.py").discover() == set()

    @pytest.mark.unit
    def test_empty_tree(self, tmp_path: Path):
        assert GrepFileDiscovery(tmp_path, "configure.py").discover() == set()


class TestGrepExitHandling:
    @pytest.mark.unit
    def test_command_shape(self, skeleton_dir: Path):
        cmd = GrepFileDiscovery(skeleton_dir, "configure.py").command()
        assert cmd[:5] == ["grep", "-E", "-r", "-l", "-i"]
        assert cmd[5] == "|".join(SEARCH_TOKENS)
        assert "--exclude-dir=vendor" in cmd
        assert "--exclude-dir=.git" in cmd
        assert cmd[-1] == ".github"
        assert "README.md" in cmd

    @pytest.mark.unit
    def test_exit_one_is_empty(self, skeleton_dir: Path):
        with patch.object(discovery_mod, "run_command", return_value=CommandResult(1, "", "")):
            assert GrepFileDiscovery(skeleton_dir, "configure.py").discover() == set()

    @pytest.mark.unit
    def test_partial_output_on_error_is_kept(self, skeleton_dir: Path):
        result = CommandResult(2, "README.md\nconfigure.py", "grep: unreadable: Permission denied")
        with patch.object(discovery_mod, "run_command", return_value=result):
            found = GrepFileDiscovery(skeleton_dir, "configure.py").discover()
        assert found == {skeleton_dir / "README.md"}

    @pytest.mark.unit
    def test_grep_missing_raises(self, skeleton_dir: Path):
        result = CommandResult(127, "", "Command not found: grep")
        with patch.object(discovery_mod, "run_command", return_value=result):
            with pytest.raises(DiscoveryError, match="exit 127"):
                GrepFileDiscovery(skeleton_dir, "configure.py").discover()


# ---------------------------------------------------------------------------
# Directory walk
# ---------------------------------------------------------------------------


class TestWalkFileDiscovery:
    @pytest.mark.unit
    def test_finds_fixture_files(self, noisy_skeleton: Path):
        found = WalkFileDiscovery(noisy_skeleton, "configure.py").discover()
        assert _relative(found, noisy_skeleton) == EXPECTED

    @pytest.mark.unit
    def test_excludes_script_by_name(self, tmp_path: Path):
        (tmp_path / "setup.py").write_text("skeleton", encoding="utf-8")
        (tmp_path / "other.py").write_text("skeleton", encoding="utf-8")
        found = WalkFileDiscovery(tmp_path, "setup.py").discover()
        assert _relative(found, tmp_path) == {"other.py"}

    @pytest.mark.unit
    def test_binary_content_tolerated(self, tmp_path: Path):
        (tmp_path / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe skeleton")
        found = WalkFileDiscovery(tmp_path, "configure.py").discover()
        assert _relative(found, tmp_path) == {"logo.png"}

    @pytest.mark.unit
    def test_no_matches_is_empty(self, tmp_path: Path):
        (tmp_path / "a.txt").write_text("nothing", encoding="utf-8")
        assert WalkFileDiscovery(tmp_path, "configure.py").discover() == set()


# ---------------------------------------------------------------------------
# select_discovery
# ---------------------------------------------------------------------------


class TestSelectDiscovery:
    @pytest.mark.unit
    @pytest.mark.parametrize("platform", ["win32", "windows"])
    def test_windows_walks(self, tmp_path: Path, platform: str):
        strategy = select_discovery(ConfigureSettings(root=tmp_path), platform=platform)
        assert isinstance(strategy, WalkFileDiscovery)

    @pytest.mark.unit
    @pytest.mark.parametrize("platform", ["linux", "darwin", "freebsd14"])
    def test_posix_greps(self, tmp_path: Path, platform: str):
        settings = ConfigureSettings(root=tmp_path, excluded_dirs=[".git", "vendor", "node_modules"])
        strategy = select_discovery(settings, platform=platform)
        assert isinstance(strategy, GrepFileDiscovery)
        assert strategy.excluded_dirs == [".git", "vendor", "node_modules"]
