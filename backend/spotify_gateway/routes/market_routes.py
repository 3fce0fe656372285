from __future__ import annotations

from flask import Blueprint
from flask.typing import ResponseReturnValue

from spotify_gateway.spotify_client import get_spotify_service
from spotify_gateway.utils.serialization import to_response

markets_bp = Blueprint("markets", __name__)


@markets_bp.get("/markets")
async def get_available_markets() -> ResponseReturnValue:
    """
    GET /markets

    A markets object with an array of country codes, e.g.
    {"markets": ["CA", "BR", "IT"]}
    """
    result = await get_spotify_service().get_available_markets()
    return to_response(result)
