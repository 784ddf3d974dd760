"""Errors raised across the load cycle.

Only one kind is distinguished: anything that goes wrong while fetching is a
`SourceError`. The load cycle converts it (and any other exception) into the
error state.
"""

from __future__ import annotations


class SourceError(Exception):
    """A listing or detail fetch failed (transport, HTTP status or payload)."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
