"""Skeleton configurator pipeline.

Runs one linear personalization pass over a freshly cloned package skeleton:

1. PROBE     -- read git config, guess the GitHub username and vendor.
2. PROMPT    -- ask for every value, defaulting from the probes.
3. CONFIRM   -- show a summary; declining exits with status 1, nothing written.
4. TRANSFORM -- find files with placeholder tokens, substitute and rename.
5. CLEANUP   -- drop declined features, optionally install/test and self-delete.

Usage::

    python configure.py
    python -m configurator.pipeline
"""

from __future__ import annotations

import sys
from pathlib import Path

from .answers import AnswerSet, PromptSession
from .cleanup import Cleanup
from .config import ConfigureSettings
from .discovery import FileDiscovery, select_discovery
from .environment import GitHubClient, UsernameGuesser, guess_vendor_info, probe_git_identity
from .exceptions import ConfigureError
from .prompts import Prompter
from .transformer import Transformer
from .utils import (
    console,
    print_error,
    print_header,
    print_note,
    print_success,
    print_summary_table,
    print_warning,
)

EXIT_OK = 0
EXIT_DECLINED = 1
EXIT_FAILED = 2


class ConfigurePipeline:
    """Wires the probes, prompts, transformer and cleanup together.

    Every collaborator can be injected; by default they are built from
    *settings*.
    """

    def __init__(
        self,
        settings: ConfigureSettings,
        prompter: Prompter | None = None,
        github: GitHubClient | None = None,
        username_guesser: UsernameGuesser | None = None,
        discovery: FileDiscovery | None = None,
    ) -> None:
        self.settings = settings
        self.prompter = prompter or Prompter()
        self.github = github or GitHubClient(
            base_url=settings.github_api_url,
            user_agent=settings.user_agent,
            timeout=settings.http_timeout,
            verbose=settings.verbose,
        )
        self.username_guesser = username_guesser or UsernameGuesser(
            cwd=settings.root,
            timeout=settings.command_timeout,
            verbose=settings.verbose,
        )
        self.discovery = discovery or select_discovery(settings)
        self.cleanup = Cleanup(settings)

    # -- Steps ---------------------------------------------------------------

    def collect_answers(self) -> AnswerSet:
        """Probe the environment and run the prompt session."""
        identity = probe_git_identity(self.settings.root, timeout=self.settings.command_timeout)
        print_note(f"git identity: {identity.model_dump()}", self.settings.verbose)

        session = PromptSession(
            self.prompter,
            author_name=identity.author_name,
            author_email=identity.author_email,
            folder_name=self.settings.root.resolve().name,
            guess_username=self.username_guesser.guess,
            guess_vendor=lambda name, username: guess_vendor_info(
                name, username, identity.remote_url, self.github
            ),
        )
        return session.collect()

    def transform(self, answers: AnswerSet) -> list[Path]:
        """Personalize every candidate file.

        Returns:
            Final locations of the processed files.
        """
        transformer = Transformer(self.settings.root, answers)
        processed: list[Path] = []
        for path in sorted(self.discovery.discover()):
            final = transformer.apply(path)
            if final != path:
                print_note(f"Renamed {path} -> {final}", self.settings.verbose)
            processed.append(final)
        return processed

    def finish(self, answers: AnswerSet) -> None:
        """Remove declined features, then offer install/test and self-deletion."""
        self.cleanup.remove_declined_features(answers)

        if self.prompter.confirm("Execute `composer install` and run tests?"):
            result = self.cleanup.run_install()
            if not result.ok:
                print_warning(f"`{self.settings.install_command}` exited with {result.returncode}")

        if self.prompter.confirm("Let this script delete itself?", True):
            self.cleanup.delete_script()

    # -- Entry ---------------------------------------------------------------

    def run(self) -> int:
        """Execute the whole pass and return the process exit status."""
        print_header("Configure package skeleton")
        answers = self.collect_answers()

        console.print()
        print_summary_table(answers.summary(), title="Package configuration")
        console.print(
            "This script will replace the above values in all relevant files "
            "in the project directory."
        )

        if not self.prompter.confirm("Modify files?", True):
            print_warning("Aborted -- no files were modified.")
            return EXIT_DECLINED

        processed = self.transform(answers)
        print_success(f"Personalized {len(processed)} file(s).")

        self.finish(answers)
        print_success("Package skeleton configured.")
        return EXIT_OK


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """CLI entry point for ``configure.py`` / ``configure-skeleton``."""
    settings = ConfigureSettings.from_env()

    try:
        code = ConfigurePipeline(settings).run()
    except ConfigureError as exc:
        print_error(f"Error: {exc}")
        code = EXIT_FAILED
    except (KeyboardInterrupt, EOFError):
        console.print()
        print_warning("Aborted.")
        code = EXIT_DECLINED

    sys.exit(code)


if __name__ == "__main__":
    main()
