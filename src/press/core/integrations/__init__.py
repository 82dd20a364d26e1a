"""Clients for third-party services projects are synced from."""

from src.press.core.integrations.github import GitHubClient, LatestCommit
from src.press.core.integrations.google_groups import DiscussionClient

__all__ = ["DiscussionClient", "GitHubClient", "LatestCommit"]
