from __future__ import annotations

from flask import Blueprint, request
from flask.typing import ResponseReturnValue

from spotify_gateway.models import DEFAULT_MARKET, ArtistsRequest, ArtistTopTracksRequest
from spotify_gateway.spotify_client import get_spotify_service
from spotify_gateway.utils.serialization import to_response
from spotify_gateway.utils.validation import id_list_arg, str_arg

artists_bp = Blueprint("artists", __name__, url_prefix="/artists")


@artists_bp.get("")
async def get_artists() -> ResponseReturnValue:
    """
    GET /artists?ids=2CIMQHirSU0MQqyYHq0eOx,57dN52uHvrHOxijzpIgu3E

    Catalog information for several artists (max 100 IDs, checked upstream).
    """
    artists_request = ArtistsRequest(ids=id_list_arg(request.args, "ids"))
    result = await get_spotify_service().get_artists(artists_request)
    return to_response(result)


@artists_bp.get("/<artist_id>/top-tracks")
async def get_artist_top_tracks(artist_id: str) -> ResponseReturnValue:
    """GET /artists/<artistId>/top-tracks?market=ES"""
    top_tracks_request = ArtistTopTracksRequest(
        artist_id=artist_id,
        market=str_arg(request.args, "market", DEFAULT_MARKET),
    )
    result = await get_spotify_service().get_artist_top_tracks(top_tracks_request)
    return to_response(result)
