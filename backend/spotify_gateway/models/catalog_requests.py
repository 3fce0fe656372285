from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


DEFAULT_MARKET = "US"


def _ordered_ids(ids: Iterable[str]) -> tuple[str, ...]:
    # Order and duplicates are kept; upstream validates count and format.
    return tuple(ids)


@dataclass(frozen=True, slots=True)
class ArtistsRequest:
    ids: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "ids", _ordered_ids(self.ids))


@dataclass(frozen=True, slots=True)
class ArtistTopTracksRequest:
    artist_id: str
    market: str = DEFAULT_MARKET


@dataclass(frozen=True, slots=True)
class CategoriesRequest:
    """Browse categories page.

    ``locale`` is forwarded as the upstream ``country`` filter.
    """

    locale: str = DEFAULT_MARKET
    limit: int = 10
    offset: int = 0


@dataclass(frozen=True, slots=True)
class NewReleasesRequest:
    limit: int = 10
    offset: int = 0


@dataclass(frozen=True, slots=True)
class TrackRequest:
    track_id: str


@dataclass(frozen=True, slots=True)
class TracksRequest:
    ids: tuple[str, ...] = field(default_factory=tuple)
    market: str = DEFAULT_MARKET

    def __post_init__(self) -> None:
        object.__setattr__(self, "ids", _ordered_ids(self.ids))


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """
    Keyword search across one or more item types.

    ``type`` is a comma-separated list drawn from album, artist, playlist,
    track, show, episode and audiobook. Audiobooks are only returned in a
    handful of markets (US, GB, CA, IE, NZ, AU).
    """

    query: str
    type: str = "album"
    market: str = DEFAULT_MARKET
    limit: int = 5
    offset: int = 0
