from __future__ import annotations

from flask import Blueprint, request
from flask.typing import ResponseReturnValue

from spotify_gateway.models import DEFAULT_MARKET, SearchRequest
from spotify_gateway.spotify_client import get_spotify_service
from spotify_gateway.utils.serialization import to_response
from spotify_gateway.utils.validation import int_arg, str_arg

search_bp = Blueprint("search", __name__)


def _normalize_types(raw: str) -> str:
    # "album, track" -> "album,track"; values themselves are checked upstream.
    return ",".join(part.strip() for part in raw.split(",") if part.strip())


@search_bp.get("/search")
async def search() -> ResponseReturnValue:
    """
    GET /search?query=<q>&type=album,track&market=US&limit=5&offset=0

    Field filters (artist:, album:, track:, year:, genre:, isrc:, upc:,
    tag:new, tag:hipster) go inside `query`. offset range is 0-1000.
    A missing `query` has no default: it is sent upstream as an empty
    string, which upstream rejects, so the route answers 404.

    Response: the upstream search object, keyed by item type
    ("albums", "tracks", ...).
    """
    search_request = SearchRequest(
        query=(request.args.get("query") or "").strip(),
        type=_normalize_types(str_arg(request.args, "type", "album")) or "album",
        market=str_arg(request.args, "market", DEFAULT_MARKET),
        limit=int_arg(request.args, "limit", 5),
        offset=int_arg(request.args, "offset", 0),
    )
    result = await get_spotify_service().search(search_request)
    return to_response(result)
