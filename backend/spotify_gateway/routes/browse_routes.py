from __future__ import annotations

from flask import Blueprint, request
from flask.typing import ResponseReturnValue

from spotify_gateway.models import DEFAULT_MARKET, CategoriesRequest, NewReleasesRequest
from spotify_gateway.spotify_client import get_spotify_service
from spotify_gateway.utils.serialization import to_response
from spotify_gateway.utils.validation import int_arg, str_arg

browse_bp = Blueprint("browse", __name__, url_prefix="/browse")


@browse_bp.get("/categories")
async def get_categories() -> ResponseReturnValue:
    """
    GET /browse/categories?locale=SE&limit=10&offset=0

    Categories used to tag items in the player's Browse tab.
    limit: 1-50, offset: index of the first item. Neither is clamped here.
    """
    categories_request = CategoriesRequest(
        locale=str_arg(request.args, "locale", DEFAULT_MARKET),
        limit=int_arg(request.args, "limit", 10),
        offset=int_arg(request.args, "offset", 0),
    )
    result = await get_spotify_service().get_categories(categories_request)
    return to_response(result)


@browse_bp.get("/newreleases")
async def get_new_releases() -> ResponseReturnValue:
    """GET /browse/newreleases?limit=10&offset=0"""
    new_releases_request = NewReleasesRequest(
        limit=int_arg(request.args, "limit", 10),
        offset=int_arg(request.args, "offset", 0),
    )
    result = await get_spotify_service().get_new_releases(new_releases_request)
    return to_response(result)
