"""
Core types for the Flicky provider system.

Every provider operation returns an Extraction: the payload is either what
was scraped from the page or the operation's fixed fallback. Callers only
ever see JSON text, never an exception.
"""
from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any


class ExtractionError(Exception):
    """Raised when a page cannot be fetched or read."""


# ──────────────────────────────
#  Search listing
# ──────────────────────────────
@dataclass
class SearchResult:
    title: str
    image: str
    href: str

    def to_dict(self):
        return {"title": self.title, "image": self.image, "href": self.href}


# ──────────────────────────────
#  Title details
# ──────────────────────────────
@dataclass
class DetailRecord:
    description: str
    aliases: str                      # "Duration: 2h 10m"
    airdate: str                      # "Rating: 7.1"

    def to_dict(self):
        return {
            "description": self.description,
            "aliases": self.aliases,
            "airdate": self.airdate,
        }


# ──────────────────────────────
#  Episodes (movies only: always one)
# ──────────────────────────────
@dataclass
class Episode:
    href: str
    title: str = "Full Movie"
    number: int = 1

    def to_dict(self):
        return {"title": self.title, "number": self.number, "href": self.href}


# ──────────────────────────────
#  Playback
# ──────────────────────────────
@dataclass
class StreamVariant:
    title: str                        # quality label e.g. "1080p"
    url: str

    def to_dict(self):
        return {"title": self.title, "url": self.url}


@dataclass
class StreamBundle:
    streams: list[StreamVariant] = field(default_factory=list)
    subtitles: str = ""               # Arabic track URL or ""

    def to_dict(self):
        return {
            "streams": [s.to_dict() for s in self.streams],
            "subtitles": self.subtitles,
        }


# ──────────────────────────────
#  Operation result
# ──────────────────────────────
@dataclass
class Extraction:
    payload: Any                      # list/dict of plain JSON values
    fallback: bool = False

    @classmethod
    def of(cls, records) -> Extraction:
        if isinstance(records, list):
            return cls([r.to_dict() for r in records])
        return cls(records.to_dict())

    def to_json(self) -> str:
        # compact, non-ASCII kept: same page in, same bytes out
        return json.dumps(self.payload, ensure_ascii=False, separators=(",", ":"))
