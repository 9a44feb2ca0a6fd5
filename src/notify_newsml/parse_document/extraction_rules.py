"""Per-dialect extraction rules.

Tag names are lower-cased local names; matching ignores case and
namespaces, so "HeadLine" in NewsML 1.x and "headline" in G2 share a rule.
"""

from __future__ import annotations

from dataclasses import dataclass

from notify_newsml.models import Dialect

METHODE_PROPERTY = "NIMethodeName"


@dataclass(frozen=True)
class ExtractionRules:
    article_tag: str
    headline_tag: str
    slugline_tag: str
    body_tag: str
    # None means every element child of the body is a paragraph
    paragraph_tag: str | None
    # None means the dialect has no structured byline
    byline_tag: str | None
    default_byline: str
    # Exactly one of these is set
    news_item_id_tag: str | None
    news_item_id_attribute: str | None
    author_link: str
    priority_tag: str
    # None means the priority is the element text
    priority_attribute: str | None
    property_tag: str = "property"
    property_key_attribute: str = "FormalName"
    property_value_attribute: str = "Value"


RULES = {
    Dialect.LEGACY: ExtractionRules(
        article_tag="newsitem",
        headline_tag="headline",
        slugline_tag="slugline",
        body_tag="body",
        paragraph_tag="p",
        byline_tag="byline",
        default_byline="",
        news_item_id_tag="newsitemid",
        news_item_id_attribute=None,
        author_link="https://www.pressassociation.com/",
        priority_tag="priority",
        priority_attribute="FormalName",
    ),
    Dialect.MODERN: ExtractionRules(
        article_tag="newsitem",
        headline_tag="headline",
        slugline_tag="slugline",
        body_tag="body",
        paragraph_tag=None,
        # TODO: pull the reporter's name out of the G2 creator/contributor block
        byline_tag=None,
        default_byline="Thomson Reuters",
        news_item_id_tag=None,
        news_item_id_attribute="guid",
        author_link="http://about.reuters.com/",
        priority_tag="priority",
        priority_attribute=None,
    ),
}


def rules_for(dialect: Dialect) -> ExtractionRules:
    return RULES[dialect]
