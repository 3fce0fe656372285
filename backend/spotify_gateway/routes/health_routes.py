from __future__ import annotations

from datetime import datetime, timezone

from flask import Blueprint, jsonify
from flask.typing import ResponseReturnValue

from spotify_gateway.spotify_client import get_spotify_service

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check() -> ResponseReturnValue:
    """
    GET /health

    Ready once the shared Spotify service is attached. Does not call
    upstream, so a token or rate-limit problem will not show here.
    """
    checked_at = datetime.now(timezone.utc).isoformat()
    try:
        get_spotify_service()
    except RuntimeError as err:
        return jsonify({"status": "unavailable", "spotify": str(err), "timestamp": checked_at}), 503
    return jsonify({"status": "ok", "spotify": "attached", "timestamp": checked_at}), 200
