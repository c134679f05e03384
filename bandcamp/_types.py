from __future__ import annotations

from typing import NotRequired, TypedDict


class TralbumJson(TypedDict):
    """Fields of the `data-tralbum` payload read by the parser."""

    artist: NotRequired[str]
    art_id: NotRequired[int | None]
    trackinfo: list[TrackInfoJson]
    current: NotRequired[CurrentJson]


class TrackInfoJson(TypedDict):
    title: str
    title_link: str
    duration: NotRequired[float | None]
    file: NotRequired[dict[str, str] | None]


class CurrentJson(TypedDict):
    title: str


RequestOptions = dict
"""Keyword arguments passed to every `Session.request` call."""
BuilderOptions = dict
"""Keyword arguments passed to `cloudscraper.create_scraper`."""
