"""Per-request options and header merging."""

from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


@dataclass(frozen=True, slots=True)
class RequestOptions:
    """Options for a single ``ApiClient.request`` call.

    ``body`` is already-serialized JSON text. ``headers`` override the
    defaults on a case-insensitive key collision.
    """

    method: str = "GET"
    body: str | None = None
    headers: Mapping[str, str] | None = None


def merge_headers(*layers: Mapping[str, str] | None) -> dict[str, str]:
    """Merge header mappings left to right; later layers win.

    Keys compare case-insensitively, so ``content-type`` in a later layer
    replaces ``Content-Type`` from an earlier one. The winning layer's
    spelling is kept.
    """
    merged: dict[str, tuple[str, str]] = {}
    for layer in layers:
        if not layer:
            continue
        for name, value in layer.items():
            merged[name.lower()] = (name, value)
    return dict(merged.values())
