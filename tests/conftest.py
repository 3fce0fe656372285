"""Shared fixtures: a mocked spotipy client behind a real SpotifyService."""

from unittest.mock import Mock

import pytest

from spotify_gateway import create_app
from spotify_gateway.services.spotify_service import SpotifyService


TRACK_PAYLOAD = {
    "id": "11dFghVXANMlKmJXsNCbNl",
    "name": "Cut To The Feeling",
    "type": "track",
    "popularity": 62,
    "artists": [{"id": "6sFIWsNpZYqfjUpaCgueju", "name": "Carly Rae Jepsen"}],
    "album": {"id": "0tGPJ0bkWOUmH7MEOR77qc", "name": "Cut To The Feeling"},
    "external_urls": {"spotify": "https://open.spotify.com/track/11dFghVXANMlKmJXsNCbNl"},
}


@pytest.fixture
def spotify_client():
    """Stand-in for spotipy.Spotify; each test sets the return values it needs."""
    return Mock()


@pytest.fixture
def service(spotify_client):
    return SpotifyService(spotify_client)


@pytest.fixture
def app(service):
    app = create_app("development", spotify_service=service)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
