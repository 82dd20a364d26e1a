"""Root test fixtures shared across all test types.

Tests run against an in-memory SQLite database (aiosqlite), so no external
services are needed. Database fixtures live in tests/integration/conftest.py.
"""

import os

# Configure the environment before any app imports
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SITE_DOMAIN", "press.test")
# Cheap hashing keeps the suite fast
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "1024")

# ruff: noqa: E402 - Imports must be after env var setup
import httpx
import pytest

from src.press.core.config import get_settings
from src.press.core.integrations import DiscussionClient, GitHubClient
from tests.helpers import discussion_handler, github_handler

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def github_client() -> GitHubClient:
    """GitHub client answering every repository with one commit at COMMIT_DATE."""
    return GitHubClient(transport=httpx.MockTransport(github_handler()))


@pytest.fixture
def discussion_client() -> DiscussionClient:
    """Discussion client serving a thread whose last post is POST_HTML's."""
    return DiscussionClient(transport=httpx.MockTransport(discussion_handler()))
