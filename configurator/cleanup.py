"""Post-transformation cleanup.

Removes the files of declined optional features, runs the install-and-test
command on request and deletes the entry script on request.  Missing files
are treated as already gone.
"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from .answers import AnswerSet
from .config import OPTIONAL_FEATURES, ConfigureSettings, OptionalFeature
from .manifest import ComposerManifest
from .utils import CommandResult, console, run_command


def remove_file(filepath: Path) -> bool:
    """Remove a file if it exists.

    Returns:
        ``True`` if a file was deleted.
    """
    if filepath.is_file():
        filepath.unlink()
        console.print(f"  [green]✓[/green] Removed: {escape(str(filepath))}", highlight=False)
        return True
    return False


class Cleanup:
    """Applies the declined-feature removals and the terminal actions."""

    def __init__(
        self,
        settings: ConfigureSettings,
        features: list[OptionalFeature] | None = None,
    ) -> None:
        self.settings = settings
        self.features = features if features is not None else OPTIONAL_FEATURES
        self.manifest = ComposerManifest(settings.manifest_path)

    def remove_feature(self, feature: OptionalFeature) -> list[Path]:
        """Delete a feature's files and strip it from the manifest."""
        removed = [
            self.settings.root / relative
            for relative in feature.files
            if remove_file(self.settings.root / relative)
        ]
        if feature.dev_dependencies:
            self.manifest.remove_dev_dependencies(feature.dev_dependencies)
        for script in feature.scripts:
            self.manifest.remove_script(script)
        return removed

    def remove_declined_features(self, answers: AnswerSet) -> list[Path]:
        removed: list[Path] = []
        for feature in self.features:
            if not answers.feature_enabled(feature):
                removed.extend(self.remove_feature(feature))
        return removed

    def run_install(self) -> CommandResult:
        """Run the install-and-test command with output streamed to the terminal."""
        return run_command(
            self.settings.install_command,
            cwd=self.settings.root,
            timeout=0,
            capture=False,
        )

    def delete_script(self) -> bool:
        return remove_file(self.settings.script_path)
