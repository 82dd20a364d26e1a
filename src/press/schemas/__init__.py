from src.press.schemas.artist import ArtistForm, ArtistRead
from src.press.schemas.project import ProjectCreate, ProjectForm, ProjectRead
from src.press.schemas.session import LoginRequest, LoginResponse, SessionRead
from src.press.schemas.user import UserRead

__all__ = [
    "ArtistForm",
    "ArtistRead",
    "LoginRequest",
    "LoginResponse",
    "ProjectCreate",
    "ProjectForm",
    "ProjectRead",
    "SessionRead",
    "UserRead",
]
