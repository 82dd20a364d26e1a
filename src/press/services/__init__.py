from src.press.services.artist_service import ArtistService
from src.press.services.project_service import ProjectService
from src.press.services.session_service import LoginResult, SessionService
from src.press.services.user_service import UserService

__all__ = ["ArtistService", "LoginResult", "ProjectService", "SessionService", "UserService"]
