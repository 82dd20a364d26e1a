"""Login session endpoints."""

from fastapi import APIRouter, Response, status

from src.press.api.dependencies import AuthenticatedUser, SessionServiceDep
from src.press.schemas import LoginRequest, LoginResponse, SessionRead, UserRead

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post(
    "",
    response_model=LoginResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Log in",
    description="Log in by email address or UUID. Sets the session cookie.",
    responses={
        201: {"description": "Logged in"},
        401: {"description": "Invalid login or password required"},
    },
)
async def login(
    request: LoginRequest,
    response: Response,
    session_service: SessionServiceDep,
) -> LoginResponse:
    result = await session_service.create(request.identifier, request.password)
    result.cookie.apply(response)
    return LoginResponse(
        session=SessionRead.model_validate(result.session),
        user=UserRead.model_validate(result.user),
    )


@router.get(
    "/me",
    response_model=UserRead,
    summary="Current user",
    responses={401: {"description": "No valid session cookie"}},
)
async def me(user: AuthenticatedUser) -> UserRead:
    return UserRead.model_validate(user)


@router.get(
    "/{session_id}",
    response_model=SessionRead,
    summary="Get session",
    responses={404: {"description": "Session not found"}},
)
async def get_session(
    session_id: str,
    session_service: SessionServiceDep,
    _user: AuthenticatedUser,
) -> SessionRead:
    login_session = await session_service.get(session_id)
    return SessionRead.model_validate(login_session)
