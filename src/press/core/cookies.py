"""Session cookie construction."""

from dataclasses import dataclass
from datetime import timedelta

from starlette.responses import Response

from src.press.core.config import get_settings


@dataclass(frozen=True)
class SessionCookie:
    """Attributes of the login cookie.

    Readable from JavaScript (not HTTP-only), sent on top-level navigation
    (SameSite=Lax), and refreshed on every authenticated request so the
    expiry slides forward.
    """

    name: str
    value: str
    max_age: int
    domain: str
    path: str = "/"
    secure: bool = True
    httponly: bool = False
    samesite: str = "lax"

    @classmethod
    def for_session(cls, session_id: str) -> "SessionCookie":
        settings = get_settings()
        return cls(
            name=settings.session_cookie_name,
            value=session_id,
            max_age=int(timedelta(days=settings.session_cookie_max_age_days).total_seconds()),
            domain=settings.site_domain,
            secure=settings.session_cookie_secure,
        )

    def apply(self, response: Response) -> None:
        response.set_cookie(
            key=self.name,
            value=self.value,
            max_age=self.max_age,
            path=self.path,
            domain=self.domain,
            secure=self.secure,
            httponly=self.httponly,
            samesite=self.samesite,  # type: ignore[arg-type]
        )
