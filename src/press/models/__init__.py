"""Model exports.

Import from here: `from src.press.models import Artist, Project`
"""

from src.press.models.artist import Artist, ArtistAlternateName
from src.press.models.ebook import Ebook, EbookPlaceholder
from src.press.models.enums import ProjectStatus
from src.press.models.project import Project
from src.press.models.session import Session
from src.press.models.user import User

__all__ = [
    # Enums
    "ProjectStatus",
    # Models
    "Artist",
    "ArtistAlternateName",
    "Ebook",
    "EbookPlaceholder",
    "Project",
    "Session",
    "User",
]
