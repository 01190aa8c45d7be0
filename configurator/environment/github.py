"""Minimal client for the public GitHub REST API.

Only the organisation lookup is needed: it turns the owner segment of the
git remote into a vendor display name and login.  Every failure mode
(transport error, timeout, non-200, malformed body) is reported as ``None``
so callers fall back to their own defaults.

Typical usage::

    client = GitHubClient()
    org = client.get_org("spatie")
    if org is not None:
        print(org.name, org.login)
"""

from __future__ import annotations

import httpx
from pydantic import BaseModel, Field

from ..utils import print_note
from .git import remote_owner


class OrgInfo(BaseModel):
    """Subset of the ``/orgs/{org}`` payload used for vendor defaults."""

    name: str | None = Field(default=None, description="Organisation display name")
    login: str | None = Field(default=None, description="Organisation login")


class GitHubClient:
    """Blocking client for ``api.github.com``.

    A fresh ``httpx.Client`` is used for each call; the configurator makes at
    most one request per run.
    """

    def __init__(
        self,
        base_url: str = "https://api.github.com",
        user_agent: str = "skeleton-configure-script/1.0",
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
        verbose: bool = False,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.verbose = verbose
        self._transport = transport

    def _client(self) -> httpx.Client:
        """Return a fresh ``Client`` configured with our base URL, headers and timeout."""
        return httpx.Client(
            base_url=self.base_url,
            headers={"User-Agent": self.user_agent},
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
            transport=self._transport,
        )

    def get_org(self, org_slug: str) -> OrgInfo | None:
        """Look up an organisation.

        Args:
            org_slug: Organisation login as it appears in URLs.

        Returns:
            An ``OrgInfo`` on HTTP 200, ``None`` otherwise.
        """
        if not org_slug:
            return None

        try:
            with self._client() as client:
                response = client.get(f"/orgs/{org_slug}")
                if response.status_code != 200:
                    print_note(
                        f"GitHub returned HTTP {response.status_code} for org '{org_slug}'",
                        self.verbose,
                    )
                    return None
                data = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            print_note(f"GitHub lookup for org '{org_slug}' failed: {exc}", self.verbose)
            return None
        except ValueError as exc:
            print_note(f"GitHub returned a malformed body for '{org_slug}': {exc}", self.verbose)
            return None

        if not isinstance(data, dict):
            return None
        return OrgInfo(
            name=data.get("name") or None,
            login=data.get("login") or None,
        )


def guess_vendor_info(
    author_name: str,
    username: str,
    remote_url: str,
    client: GitHubClient,
) -> tuple[str, str]:
    """Guess the vendor display name and username.

    The remote's owner segment is looked up as a GitHub organisation; each
    missing field falls back to the author name / author username.
    """
    org = client.get_org(remote_owner(remote_url))
    if org is None:
        return author_name, username
    return org.name or author_name, org.login or username
