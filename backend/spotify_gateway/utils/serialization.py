from __future__ import annotations

from flask import jsonify
from flask.typing import ResponseReturnValue

from spotify_gateway.models import SpotifyResult


def to_response(result: SpotifyResult) -> ResponseReturnValue:
    # Any missing payload is a 404; the failure reason stays server-side.
    if not result.ok:
        return "", 404
    return jsonify(result.value), 200
