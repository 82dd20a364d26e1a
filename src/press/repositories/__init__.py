"""Repository layer - data access abstraction."""

from src.press.repositories.artist import ArtistRepository
from src.press.repositories.base import BaseRepository
from src.press.repositories.ebook import EbookRepository
from src.press.repositories.project import ProjectRepository
from src.press.repositories.session import SessionRepository
from src.press.repositories.user import UserRepository

__all__ = [
    "ArtistRepository",
    "BaseRepository",
    "EbookRepository",
    "ProjectRepository",
    "SessionRepository",
    "UserRepository",
]
