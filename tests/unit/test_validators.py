"""Unit tests for external service URL handling."""

import pytest

from src.press.core.validators import (
    canonicalize_discussion_url,
    github_commits_api_url,
    is_discussion_url,
    is_github_repo_url,
    is_github_url,
    normalize_vcs_url,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://github.com/standardebooks/foo", True),
        ("https://github.com/standardebooks/foo/tree/main", True),
        ("HTTPS://GITHUB.COM/standardebooks/foo", True),
        ("https://github.com/standardebooks", False),
        ("http://github.com/standardebooks/foo", False),
        ("https://gitlab.com/standardebooks/foo", False),
        ("", False),
        (None, False),
    ],
)
def test_is_github_repo_url(url, expected):
    assert is_github_repo_url(url) is expected


def test_is_github_url_accepts_any_github_page():
    assert is_github_url("https://github.com/standardebooks")
    assert not is_github_url("https://example.com/github.com/")


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("  https://github.com/a/b/  ", "https://github.com/a/b"),
        ("https://github.com/a/b///", "https://github.com/a/b"),
        (None, ""),
        ("   ", ""),
    ],
)
def test_normalize_vcs_url(url, expected):
    assert normalize_vcs_url(url) == expected


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        (
            "https://groups.google.com/g/standardebooks/c/abc123/m/def456",
            "https://groups.google.com/g/standardebooks/c/abc123",
        ),
        (
            "https://groups.google.com/g/standardebooks/c/abc123?hl=en",
            "https://groups.google.com/g/standardebooks/c/abc123",
        ),
        (
            "https://groups.google.com/g/standardebooks/c/abc123",
            "https://groups.google.com/g/standardebooks/c/abc123",
        ),
        (
            "https://groups.google.com/g/standardebooks/",
            "https://groups.google.com/g/standardebooks/",
        ),
        ("https://example.com/thread/1", "https://example.com/thread/1"),
    ],
)
def test_canonicalize_discussion_url(url, expected):
    assert canonicalize_discussion_url(url) == expected


def test_is_discussion_url():
    assert is_discussion_url("https://groups.google.com/g/standardebooks/c/abc")
    assert not is_discussion_url("https://groups.google.com/g/other/c/abc")
    assert not is_discussion_url(None)


def test_github_commits_api_url():
    assert (
        github_commits_api_url("https://github.com/standardebooks/foo")
        == "https://api.github.com/repos/standardebooks/foo/commits"
    )
