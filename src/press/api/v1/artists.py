"""Artwork artist endpoints."""

from fastapi import APIRouter, status

from src.press.api.dependencies import ArtistServiceDep, AuthenticatedUser
from src.press.models import Artist
from src.press.schemas import ArtistForm, ArtistRead
from src.press.services import ArtistService

router = APIRouter(prefix="/artists", tags=["artists"])


async def _to_read(artist: Artist, artist_service: ArtistService) -> ArtistRead:
    read = ArtistRead.model_validate(artist)
    read.alternate_names = await artist_service.get_alternate_names(artist)
    return read


@router.get(
    "",
    response_model=list[ArtistRead],
    summary="List artists",
    description="All artists ordered by name.",
)
async def list_artists(artist_service: ArtistServiceDep) -> list[ArtistRead]:
    artists = await artist_service.get_all()
    return [ArtistRead.model_validate(a) for a in artists]


@router.get(
    "/by-alternate-name/{url_name}",
    response_model=ArtistRead,
    summary="Find artist by alternate name",
    responses={404: {"description": "No artist has this alternate name"}},
)
async def get_artist_by_alternate_name(
    url_name: str, artist_service: ArtistServiceDep
) -> ArtistRead:
    artist = await artist_service.get_by_alternate_url_name(url_name)
    return await _to_read(artist, artist_service)


@router.get(
    "/{artist_id}",
    response_model=ArtistRead,
    summary="Get artist",
    responses={404: {"description": "Artist not found"}},
)
async def get_artist(artist_id: int, artist_service: ArtistServiceDep) -> ArtistRead:
    artist = await artist_service.get(artist_id)
    return await _to_read(artist, artist_service)


@router.post(
    "",
    response_model=ArtistRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create artist",
    responses={
        201: {"description": "Artist created"},
        422: {"description": "Artist failed validation"},
    },
)
async def create_artist(
    form: ArtistForm,
    artist_service: ArtistServiceDep,
    _user: AuthenticatedUser,
) -> ArtistRead:
    artist = await artist_service.create(form.apply_to(Artist()))
    return await _to_read(artist, artist_service)


@router.post(
    "/get-or-create",
    response_model=ArtistRead,
    summary="Get or create artist",
    description="Return the artist matching the name's slug (primary or alternate), "
    "creating it if none exists.",
    responses={422: {"description": "Artist failed validation"}},
)
async def get_or_create_artist(
    form: ArtistForm,
    artist_service: ArtistServiceDep,
    _user: AuthenticatedUser,
) -> ArtistRead:
    artist = await artist_service.get_or_create(form.apply_to(Artist()))
    return await _to_read(artist, artist_service)


@router.delete(
    "/{artist_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete artist",
    responses={404: {"description": "Artist not found"}},
)
async def delete_artist(
    artist_id: int,
    artist_service: ArtistServiceDep,
    _user: AuthenticatedUser,
) -> None:
    artist = await artist_service.get(artist_id)
    await artist_service.delete(artist)
