"""Data models for the notify_newsml pipeline."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from common.serialization import serialize_dataclass


class Dialect(str, Enum):
    """NewsML generation a document is written in."""
    LEGACY = "legacy"  # NewsML 1.x, e.g. PA
    MODERN = "modern"  # NewsML-G2, e.g. Reuters


@dataclass(frozen=True)
class ParsedArticle:
    """Fields extracted from a single news item."""
    headline: str
    body_paragraphs: list[str]
    excerpt: str
    byline: str
    author_link: str
    slugline: str
    news_item_id: str

    @property
    def text(self) -> str:
        return "\n".join(self.body_paragraphs)


@dataclass(frozen=True)
class PriorityInfo:
    """Editorial priority with its display label and colour."""
    level: int
    label: str
    color: str

    @property
    def display(self) -> str:
        return f"{self.level}: {self.label}"


@dataclass(frozen=True)
class DocumentMetadata:
    """Document-scoped values shared by every article."""
    methode_name: Optional[str]
    raw_priority: Optional[str]


@dataclass(frozen=True)
class AttachmentField:
    title: str
    value: Optional[str]
    short: bool = True


@dataclass(frozen=True)
class Attachment:
    """A chat-webhook attachment built from one article."""
    fallback: str
    title: str
    color: str
    pretext: Optional[str]
    text: str
    author_name: str
    author_link: str
    fields: list[AttachmentField] = field(default_factory=list)


@dataclass(frozen=True)
class NotificationPayload:
    """Notification for one document, ready to post."""
    dialect: Dialect
    priority: PriorityInfo
    attachments: list[Attachment]
    summary_text: str = ""

    def to_webhook_body(self) -> dict:
        """Serialize to the incoming-webhook JSON body."""
        return {
            "text": self.summary_text,
            "attachments": [serialize_dataclass(a, drop_none=True) for a in self.attachments],
        }
