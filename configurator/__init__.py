"""Interactive configurator for a Laravel package skeleton.

Personalizes a freshly cloned skeleton in one pass: placeholder tokens are
replaced with the author/vendor/package answers, template files are renamed,
and opt-out feature files are removed.

Quick usage::

    from configurator import ConfigurePipeline, ConfigureSettings

    settings = ConfigureSettings(root=Path("my-package"))
    exit_code = ConfigurePipeline(settings).run()
"""

from configurator.answers import AnswerSet, PromptSession
from configurator.config import ConfigureSettings
from configurator.pipeline import ConfigurePipeline, main

__all__ = [
    "AnswerSet",
    "ConfigurePipeline",
    "ConfigureSettings",
    "PromptSession",
    "main",
]
