"""Data models for feedsift."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from dateutil import parser as date_parser


@dataclass(frozen=True)
class FeedItem:
    """Represents a single RSS/Atom feed item."""

    title: str
    description: str
    clean_content: str
    link: str
    pub_date: str
    guid: str | None = None
    featured_image: str | None = None
    images: tuple[str, ...] | None = None

    def published_at(self) -> datetime | None:
        """Parse pub_date into a datetime, or None if it cannot be parsed."""
        if not self.pub_date:
            return None
        try:
            return date_parser.parse(self.pub_date)
        except (ValueError, TypeError, OverflowError):
            return None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "cleanContent": self.clean_content,
            "link": self.link,
            "pubDate": self.pub_date,
        }
        if self.guid is not None:
            data["guid"] = self.guid
        if self.featured_image is not None:
            data["featuredImage"] = self.featured_image
        if self.images is not None:
            data["images"] = list(self.images)
        return data


@dataclass(frozen=True)
class Feed:
    """Channel metadata plus its items in document order."""

    title: str
    description: str
    link: str
    items: tuple[FeedItem, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "link": self.link,
            "items": [item.to_dict() for item in self.items],
        }
