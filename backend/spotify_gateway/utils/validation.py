from __future__ import annotations

from typing import Mapping

from werkzeug.datastructures import MultiDict


class ValidationError(ValueError):
    """Raised when a query parameter cannot be read into its request type."""


def int_arg(args: Mapping[str, str], name: str, default: int) -> int:
    """Integer query parameter; ranges are left to the upstream API."""
    raw = (args.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"`{name}` must be an integer") from None


def str_arg(args: Mapping[str, str], name: str, default: str) -> str:
    return (args.get(name) or "").strip() or default


def id_list_arg(args: MultiDict, name: str) -> list[str]:
    """
    Collect IDs from ``?ids=a,b`` and/or ``?ids=a&ids=b``.

    Order is preserved and blanks are dropped; nothing is deduplicated.
    """
    ids: list[str] = []
    for value in args.getlist(name):
        ids.extend(part.strip() for part in value.split(",") if part.strip())
    return ids
