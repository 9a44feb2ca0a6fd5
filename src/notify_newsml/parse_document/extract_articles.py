"""Extract articles and document metadata from a parsed NewsML tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from lxml import etree

from notify_newsml.errors import MissingMethodeProperty
from notify_newsml.models import Dialect, DocumentMetadata, ParsedArticle
from notify_newsml.parse_document.detect_dialect import local_name
from notify_newsml.parse_document.extraction_rules import (
    METHODE_PROPERTY,
    ExtractionRules,
    rules_for,
)

logger = logging.getLogger(__name__)

BYLINE_PREFIX = "By "
NEWSML_ID_PREFIX = "newsml_"


@dataclass
class ExtractedDocument:
    """Article nodes and metadata located in one document."""
    articles: list[etree._Element]
    metadata: DocumentMetadata


def iter_named(node: etree._Element, name: str) -> Iterator[etree._Element]:
    """Yield descendants of node (not node itself) whose local name matches."""
    for element in node.iter():
        if element is not node and local_name(element) == name:
            yield element


def find_first(node: etree._Element, name: str) -> Optional[etree._Element]:
    return next(iter_named(node, name), None)


def get_attribute(element: etree._Element, name: str) -> Optional[str]:
    """Case-insensitive attribute lookup, ignoring namespaces."""
    wanted = name.lower()
    for key, value in element.attrib.items():
        if etree.QName(key).localname.lower() == wanted:
            return value
    return None


def text_of(element: Optional[etree._Element]) -> str:
    """Full text content of an element, stripped."""
    if element is None:
        return ""
    return "".join(element.itertext()).strip()


def normalize_byline(byline: str) -> str:
    """Remove a single leading "By " from a byline."""
    return byline.removeprefix(BYLINE_PREFIX)


def news_item_id_from_guid(guid: Optional[str]) -> str:
    """Derive the news item id from a colon-delimited G2 guid.

    Takes the first segment carrying the "newsml_" prefix, falling back to
    the third segment, and strips the prefix:

        tag:reuters.com,2015:newsml_L5N11Z1CA -> L5N11Z1CA
        tag:reuters.com:2015:newsml_ABC123   -> ABC123
    """
    if not guid:
        return ""
    segments = guid.split(":")
    candidate = next((s for s in segments if s.startswith(NEWSML_ID_PREFIX)), None)
    if candidate is None:
        candidate = segments[2] if len(segments) > 2 else ""
    return candidate.removeprefix(NEWSML_ID_PREFIX)


def _body_paragraphs(article: etree._Element, body_tag: str, paragraph_tag: str | None) -> list[str]:
    body = find_first(article, body_tag)
    if body is None:
        return []

    if paragraph_tag is None:
        nodes = [child for child in body if isinstance(child.tag, str)]
    else:
        nodes = list(iter_named(body, paragraph_tag))

    paragraphs = [text_of(node) for node in nodes]
    return [p for p in paragraphs if p]


def extract_article(article: etree._Element, dialect: Dialect) -> Optional[ParsedArticle]:
    """Extract a ParsedArticle from one news item node.

    Returns None when the article has no body text; callers skip it.
    """
    rules = rules_for(dialect)

    paragraphs = _body_paragraphs(article, rules.body_tag, rules.paragraph_tag)
    if not "".join(paragraphs).strip():
        return None

    if rules.byline_tag is not None:
        byline = text_of(find_first(article, rules.byline_tag)) or rules.default_byline
    else:
        byline = rules.default_byline

    if rules.news_item_id_attribute is not None:
        news_item_id = news_item_id_from_guid(get_attribute(article, rules.news_item_id_attribute))
    else:
        news_item_id = text_of(find_first(article, rules.news_item_id_tag))

    return ParsedArticle(
        headline=text_of(find_first(article, rules.headline_tag)),
        body_paragraphs=paragraphs,
        excerpt=paragraphs[0],
        byline=normalize_byline(byline),
        author_link=rules.author_link,
        slugline=text_of(find_first(article, rules.slugline_tag)),
        news_item_id=news_item_id,
    )


def extract_articles(articles: list[etree._Element], dialect: Dialect) -> list[ParsedArticle]:
    """Extract every article node in order, dropping those without a body."""
    results = []
    for index, node in enumerate(articles):
        parsed = extract_article(node, dialect)
        if parsed is None:
            logger.warning("Skipping article %d with empty body", index)
            continue
        results.append(parsed)

    logger.info("Extracted %d of %d articles", len(results), len(articles))
    return results


def _find_methode_name(root: etree._Element, rules: ExtractionRules) -> Optional[str]:
    for prop in iter_named(root, rules.property_tag):
        if get_attribute(prop, rules.property_key_attribute) == METHODE_PROPERTY:
            return get_attribute(prop, rules.property_value_attribute)
    return None


def _find_priority(root: etree._Element, rules: ExtractionRules) -> Optional[str]:
    element = find_first(root, rules.priority_tag)
    if element is None:
        return None
    if rules.priority_attribute is not None:
        return get_attribute(element, rules.priority_attribute)
    return text_of(element)


def extract_document(
    root: etree._Element,
    dialect: Dialect,
    require_methode: bool = False,
) -> ExtractedDocument:
    """Locate article nodes and document-level metadata.

    Args:
        root: Root element of the parsed document
        dialect: Dialect returned by detect_dialect
        require_methode: Fail when the NIMethodeName property is missing

    Raises:
        MissingMethodeProperty: If require_methode is set and no property matches
    """
    rules = rules_for(dialect)

    articles = list(iter_named(root, rules.article_tag))
    methode_name = _find_methode_name(root, rules)

    if methode_name is None:
        if require_methode:
            raise MissingMethodeProperty(f"No {METHODE_PROPERTY} property in document")
        logger.debug("No %s property in document", METHODE_PROPERTY)

    metadata = DocumentMetadata(
        methode_name=methode_name,
        raw_priority=_find_priority(root, rules),
    )
    logger.info("Found %d %s articles", len(articles), dialect.value)
    return ExtractedDocument(articles=articles, metadata=metadata)
