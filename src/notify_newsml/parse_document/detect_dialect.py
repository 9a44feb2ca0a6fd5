"""Parse raw NewsML and work out which dialect it is written in."""

from __future__ import annotations

import logging

from lxml import etree

from notify_newsml.errors import InvalidDocument
from notify_newsml.models import Dialect

logger = logging.getLogger(__name__)

# Lower-cased local names of the dialect root elements
ROOT_TAGS = {
    "newsmessage": Dialect.MODERN,
    "newsml": Dialect.LEGACY,
}


def local_name(element) -> str:
    """Lower-cased tag name without namespace; "" for comments and PIs."""
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    return etree.QName(tag).localname.lower()


def parse_xml(text: str | bytes) -> etree._Element:
    """Build an element tree from raw XML.

    Raises:
        InvalidDocument: If the input is empty or not well-formed XML
    """
    # Text is already decoded, so any encoding declaration in it is ignored
    encoding = None
    if isinstance(text, str):
        text = text.encode("utf-8")
        encoding = "utf-8"
    if not text.strip():
        raise InvalidDocument("Empty document")

    parser = etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
    )
    try:
        return etree.fromstring(text, parser=parser)
    except etree.XMLSyntaxError as exc:
        raise InvalidDocument(f"Malformed XML: {exc}") from exc


def detect_dialect(root: etree._Element) -> Dialect:
    """Return the dialect named by the root element.

    Raises:
        InvalidDocument: If the root is neither newsMessage nor NewsML
    """
    name = local_name(root)
    dialect = ROOT_TAGS.get(name)
    if dialect is None:
        raise InvalidDocument(f"Not valid NewsML: unexpected root element <{name}>")

    logger.debug("Detected %s dialect (root <%s>)", dialect.value, name)
    return dialect
