"""URL patterns for the external services projects link to."""

import re
from typing import Final

GITHUB_REPO_REGEX: Final[str] = r"^https://github\.com/[^/]+/[^/]+"
GITHUB_PREFIX_REGEX: Final[str] = r"^https://github\.com/"
DISCUSSION_PREFIX_REGEX: Final[str] = r"^https://groups\.google\.com/g/standardebooks/"
DISCUSSION_THREAD_REGEX: Final[str] = r"^(https://groups\.google\.com/g/standardebooks/c/[^/?#]+).*"

_GITHUB_REPO_PATTERN: Final[re.Pattern[str]] = re.compile(GITHUB_REPO_REGEX, re.IGNORECASE)
_GITHUB_PREFIX_PATTERN: Final[re.Pattern[str]] = re.compile(GITHUB_PREFIX_REGEX, re.IGNORECASE)
_DISCUSSION_PREFIX_PATTERN: Final[re.Pattern[str]] = re.compile(
    DISCUSSION_PREFIX_REGEX, re.IGNORECASE
)
_DISCUSSION_THREAD_PATTERN: Final[re.Pattern[str]] = re.compile(
    DISCUSSION_THREAD_REGEX, re.IGNORECASE | re.DOTALL
)


def normalize_vcs_url(url: str | None) -> str:
    """Trim whitespace and any trailing slashes."""
    return (url or "").strip().rstrip("/")


def is_github_repo_url(url: str | None) -> bool:
    """True for ``https://github.com/<owner>/<repo>...``."""
    return bool(url and _GITHUB_REPO_PATTERN.match(url))


def is_github_url(url: str | None) -> bool:
    return bool(url and _GITHUB_PREFIX_PATTERN.match(url))


def is_discussion_url(url: str | None) -> bool:
    """True for threads in the project's Google Groups mailing list."""
    return bool(url and _DISCUSSION_PREFIX_PATTERN.match(url))


def canonicalize_discussion_url(url: str) -> str:
    """Reduce a mailing list URL to its base thread URL.

    Links to a single message (``.../c/<thread>/m/<message>``) or with a query
    string collapse to ``.../c/<thread>``. Non-thread URLs are returned as-is.
    """
    if not is_discussion_url(url):
        return url
    return _DISCUSSION_THREAD_PATTERN.sub(r"\1", url)


def github_commits_api_url(vcs_url: str) -> str:
    """Rewrite a repository web URL to its commit-list API endpoint."""
    return _GITHUB_PREFIX_PATTERN.sub("https://api.github.com/repos/", vcs_url + "/commits", count=1)
