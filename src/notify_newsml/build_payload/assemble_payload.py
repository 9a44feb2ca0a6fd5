"""Build the chat-webhook payload from extracted articles."""

from __future__ import annotations

import logging

from notify_newsml.errors import NoArticlesFound
from notify_newsml.models import (
    Attachment,
    AttachmentField,
    Dialect,
    DocumentMetadata,
    NotificationPayload,
    ParsedArticle,
    PriorityInfo,
)

logger = logging.getLogger(__name__)

ALERT_EVERYONE = "<!channel>"


def build_attachment(
    article: ParsedArticle,
    priority: PriorityInfo,
    metadata: DocumentMetadata,
    alert_priority: int,
) -> Attachment:
    """Build one attachment; fields are slugline, methode, item id, priority."""
    return Attachment(
        fallback=f"{article.headline} [{priority.level}] -- {article.excerpt}",
        title=article.headline,
        color=priority.color,
        pretext=ALERT_EVERYONE if priority.level <= alert_priority else None,
        text=article.text,
        author_name=article.byline,
        author_link=article.author_link,
        fields=[
            AttachmentField(title="slugline", value=article.slugline),
            AttachmentField(title="Methode Name", value=metadata.methode_name),
            AttachmentField(title="News Item ID", value=article.news_item_id),
            AttachmentField(title="Priority", value=priority.display),
        ],
    )


def assemble_payload(
    articles: list[ParsedArticle],
    priority: PriorityInfo,
    metadata: DocumentMetadata,
    dialect: Dialect,
    alert_priority: int,
) -> NotificationPayload:
    """Build the notification payload, one attachment per article in order.

    Raises:
        NoArticlesFound: If there are no articles to attach
    """
    if not articles:
        raise NoArticlesFound("No articles found.")

    attachments = [
        build_attachment(article, priority, metadata, alert_priority)
        for article in articles
    ]
    logger.info("Built %d attachments at priority %d", len(attachments), priority.level)

    return NotificationPayload(
        dialect=dialect,
        priority=priority,
        attachments=attachments,
    )
