from fastapi import APIRouter

from src.press.api.v1 import artists, projects, sessions

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(artists.router)
api_router.include_router(sessions.router)
api_router.include_router(projects.router)
