from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

import requests
import spotipy
from spotipy.exceptions import SpotifyException
from spotipy.oauth2 import SpotifyClientCredentials, SpotifyOauthError

from spotify_gateway.models import (
    ArtistsRequest,
    ArtistTopTracksRequest,
    CategoriesRequest,
    NewReleasesRequest,
    SearchRequest,
    SpotifyResult,
    TrackRequest,
    TracksRequest,
)

logger = logging.getLogger(__name__)


class SpotifyService:
    """
    Thin async wrapper over one shared spotipy client.

    Every method returns a SpotifyResult; upstream errors never escape.
    """

    def __init__(self, client: spotipy.Spotify) -> None:
        self._client = client

    @classmethod
    def from_credentials(cls, client_id: str | None, client_secret: str | None) -> "SpotifyService":
        """Client Credentials flow; spotipy owns token caching and refresh."""
        if not client_id or not client_secret:
            raise RuntimeError("Spotify client ID/secret not configured")

        auth_manager = SpotifyClientCredentials(client_id=client_id, client_secret=client_secret)
        # A caller-supplied session gets no retry adapter mounted by spotipy.
        client = spotipy.Spotify(
            auth_manager=auth_manager,
            requests_session=requests.Session(),
            retries=0,
            status_retries=0,
        )
        return cls(client)

    async def _call(self, operation: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> SpotifyResult:
        try:
            payload = await asyncio.to_thread(func, *args, **kwargs)
        except SpotifyException as exc:
            logger.warning("Error retrieving %s: %s", operation, exc.msg)
            return SpotifyResult.fail(operation, str(exc.msg), exc.http_status)
        except SpotifyOauthError as exc:
            logger.warning("Error retrieving %s: authentication failed: %s", operation, exc)
            return SpotifyResult.fail(operation, str(exc), 401)
        except requests.RequestException as exc:
            logger.warning("Error retrieving %s: %s", operation, exc)
            return SpotifyResult.fail(operation, str(exc))

        if payload is None:
            logger.info("Empty response retrieving %s", operation)
            return SpotifyResult.fail(operation, "empty response")
        return SpotifyResult.success(payload)

    async def get_available_markets(self) -> SpotifyResult:
        return await self._call("available Markets", self._client.available_markets)

    async def get_artists(self, request: ArtistsRequest) -> SpotifyResult:
        return await self._call("Artists", self._client.artists, list(request.ids))

    async def get_artist_top_tracks(self, request: ArtistTopTracksRequest) -> SpotifyResult:
        return await self._call(
            "Artist's Top Tracks",
            self._client.artist_top_tracks,
            request.artist_id,
            country=request.market,
        )

    async def get_categories(self, request: CategoriesRequest) -> SpotifyResult:
        return await self._call(
            "Categories",
            self._client.categories,
            country=request.locale,
            limit=request.limit,
            offset=request.offset,
        )

    async def get_new_releases(self, request: NewReleasesRequest) -> SpotifyResult:
        return await self._call(
            "New Releases",
            self._client.new_releases,
            limit=request.limit,
            offset=request.offset,
        )

    async def get_track(self, request: TrackRequest) -> SpotifyResult:
        return await self._call("Track", self._client.track, request.track_id)

    async def get_tracks(self, request: TracksRequest) -> SpotifyResult:
        return await self._call("Tracks", self._client.tracks, list(request.ids), market=request.market)

    async def search(self, request: SearchRequest) -> SpotifyResult:
        return await self._call(
            "search",
            self._client.search,
            q=request.query,
            limit=request.limit,
            offset=request.offset,
            type=request.type,
            market=request.market,
        )
