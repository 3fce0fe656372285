from __future__ import annotations

from flask import Flask, current_app

from spotify_gateway.services.spotify_service import SpotifyService

# Key under which we store the shared service on Flask's extensions
_SPOTIFY_SERVICE_KEY = "spotify_service"


def init_spotify_service(app: Flask, service: SpotifyService | None = None) -> None:
    """
    Attach the one SpotifyService this process uses.

    - Preferred for tests: pass a ready-made service.
    - Otherwise: build it from SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET.
    """
    if service is None:
        service = SpotifyService.from_credentials(
            app.config.get("SPOTIFY_CLIENT_ID"),
            app.config.get("SPOTIFY_CLIENT_SECRET"),
        )
        app.logger.info("Spotify client initialised (client credentials flow)")

    app.extensions[_SPOTIFY_SERVICE_KEY] = service


def get_spotify_service() -> SpotifyService:
    service = current_app.extensions.get(_SPOTIFY_SERVICE_KEY)
    if service is None:
        raise RuntimeError("Spotify service not initialised on this app")
    return service
