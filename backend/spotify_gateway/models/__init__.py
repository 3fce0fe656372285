from .catalog_requests import (
    DEFAULT_MARKET,
    ArtistsRequest,
    ArtistTopTracksRequest,
    CategoriesRequest,
    NewReleasesRequest,
    SearchRequest,
    TrackRequest,
    TracksRequest,
)
from .result import SpotifyFailure, SpotifyResult

__all__ = [
    "ArtistsRequest",
    "ArtistTopTracksRequest",
    "CategoriesRequest",
    "DEFAULT_MARKET",
    "NewReleasesRequest",
    "SearchRequest",
    "SpotifyFailure",
    "SpotifyResult",
    "TrackRequest",
    "TracksRequest",
]
