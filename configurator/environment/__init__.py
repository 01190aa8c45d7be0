"""Environment probing -- git config, GitHub API and username inference.

Quick usage::

    from configurator.environment import GitHubClient, UsernameGuesser, probe_git_identity

    identity = probe_git_identity(".")
    username = UsernameGuesser(".").guess()
"""

from configurator.environment.git import GitIdentity, probe_git_identity, remote_owner
from configurator.environment.github import GitHubClient, OrgInfo, guess_vendor_info
from configurator.environment.username import UsernameGuesser

__all__ = [
    "GitHubClient",
    "GitIdentity",
    "OrgInfo",
    "UsernameGuesser",
    "guess_vendor_info",
    "probe_git_identity",
    "remote_owner",
]
