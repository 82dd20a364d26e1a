"""Cookie authentication dependencies."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, Response, status

from src.press.api.dependencies.services import SessionServiceDep
from src.press.core.config import get_settings
from src.press.core.logging import bind_user_context
from src.press.models import User


async def get_current_user(
    request: Request,
    response: Response,
    session_service: SessionServiceDep,
) -> User | None:
    """Resolve the session cookie to a user, or None for anonymous requests.

    A valid cookie is re-sent with a fresh expiry. An unknown cookie is
    ignored and left in place.
    """
    session_id = request.cookies.get(get_settings().session_cookie_name)
    login = await session_service.initialize_from_cookie(session_id)
    if login is None:
        return None

    login.cookie.apply(response)
    if login.user.id is not None:
        bind_user_context(login.user.id)
    return login.user


CurrentUser = Annotated[User | None, Depends(get_current_user)]


async def get_authenticated_user(user: CurrentUser) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login required",
        )
    return user


AuthenticatedUser = Annotated[User, Depends(get_authenticated_user)]
