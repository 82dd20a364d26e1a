"""GitHub client used to find a project's latest commit."""

from dataclasses import dataclass
from datetime import datetime

import httpx

from src.press.core.config import get_settings
from src.press.core.exceptions import AppException
from src.press.core.logging import get_logger
from src.press.core.validators import github_commits_api_url
from src.press.models.base import to_naive_utc

logger = get_logger(__name__)

GITHUB_API_VERSION = "2022-11-28"


@dataclass(frozen=True)
class LatestCommit:
    """Result of a commit lookup.

    Attributes:
        repository_url: Where the repository lives now. Differs from the
            requested URL when GitHub redirected us after a rename.
        committed_at: Committer date of the newest commit (naive UTC), or
            None if the repository has no commits.
    """

    repository_url: str
    committed_at: datetime | None


class GitHubClient:
    """Thin async wrapper over the GitHub REST API.

    Args:
        api_key: Optional token, sent as ``Authorization: Bearer``.
        transport: Optional httpx transport override for testing.
        timeout: Seconds before any single request gives up.
    """

    def __init__(
        self,
        api_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ):
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.github_api_key
        self.user_agent = settings.app_name  # GitHub rejects requests without one
        self.timeout = timeout if timeout is not None else settings.external_http_timeout_seconds
        self.transport = transport

    def _headers(self, api_key: str | None) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "User-Agent": self.user_agent,
        }
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            transport=self.transport,
            follow_redirects=True,
        )

    async def latest_commit(self, vcs_url: str, api_key: str | None = None) -> LatestCommit:
        """Follow renames of ``vcs_url`` and read its newest commit date.

        Raises:
            AppException: On any transport error, non-200 status, or a body
                that is not a JSON list of commits.
        """
        api_url = github_commits_api_url(vcs_url)
        try:
            async with self._client() as client:
                # HEAD with redirects tells us if the repository was renamed
                head = await client.head(vcs_url, headers={"User-Agent": self.user_agent})
                repository_url = str(head.url).rstrip("/")
                if repository_url != vcs_url:
                    logger.info("Repository moved", old_url=vcs_url, new_url=repository_url)
                    api_url = github_commits_api_url(repository_url)

                response = await client.get(api_url, headers=self._headers(api_key or self.api_key))
        except httpx.HTTPError as e:
            raise AppException(f"Error when fetching commits for URL <{api_url}>: {e}") from e

        if response.status_code != httpx.codes.OK:
            raise AppException(
                f"Error when fetching commits for URL <{api_url}>: "
                f"HTTP code {response.status_code} received."
            )

        try:
            commits = response.json()
            if not isinstance(commits, list):
                raise ValueError("expected a list of commits")
            committed_at = None
            if commits:
                raw_date = commits[0]["commit"]["committer"]["date"]
                committed_at = to_naive_utc(datetime.fromisoformat(raw_date))
        except (ValueError, KeyError, TypeError) as e:
            raise AppException(f"Error when fetching commits for URL <{api_url}>: {e}") from e

        return LatestCommit(repository_url=repository_url, committed_at=committed_at)
