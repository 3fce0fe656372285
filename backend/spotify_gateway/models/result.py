from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SpotifyFailure:
    operation: str
    message: str
    http_status: int | None = None


@dataclass(frozen=True, slots=True)
class SpotifyResult:
    """Outcome of one upstream call: a payload, or the reason there is none."""

    value: Any = None
    failure: SpotifyFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None and self.value is not None

    @classmethod
    def success(cls, value: Any) -> "SpotifyResult":
        return cls(value=value)

    @classmethod
    def fail(cls, operation: str, message: str, http_status: int | None = None) -> "SpotifyResult":
        return cls(failure=SpotifyFailure(operation=operation, message=message, http_status=http_status))
