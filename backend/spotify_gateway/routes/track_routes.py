from __future__ import annotations

from flask import Blueprint, request
from flask.typing import ResponseReturnValue

from spotify_gateway.models import DEFAULT_MARKET, TrackRequest, TracksRequest
from spotify_gateway.spotify_client import get_spotify_service
from spotify_gateway.utils.serialization import to_response
from spotify_gateway.utils.validation import id_list_arg, str_arg

tracks_bp = Blueprint("tracks", __name__)


@tracks_bp.get("/track/<track_id>")
async def get_track(track_id: str) -> ResponseReturnValue:
    """
    GET /track/11dFghVXANMlKmJXsNCbNl

    Returns the upstream track object as-is, or 404.
    """
    result = await get_spotify_service().get_track(TrackRequest(track_id=track_id))
    return to_response(result)


@tracks_bp.get("/tracks")
async def get_tracks() -> ResponseReturnValue:
    """GET /tracks?ids=7ouMYWpwJ422jRcDASZB7P,4VqPOruhp5EdPBeR92t6lQ&market=ES"""
    tracks_request = TracksRequest(
        ids=id_list_arg(request.args, "ids"),
        market=str_arg(request.args, "market", DEFAULT_MARKET),
    )
    result = await get_spotify_service().get_tracks(tracks_request)
    return to_response(result)
