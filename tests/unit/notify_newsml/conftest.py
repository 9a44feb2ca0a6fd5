"""Shared NewsML document builders for notify_newsml tests."""

from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

import pytest

from notify_newsml.config import NotifyConfig


def _paragraphs(paragraphs: list[str]) -> str:
    return "".join(f"<p>{escape(p)}</p>" for p in paragraphs)


def _legacy_item(item: dict) -> str:
    byline = item.get("byline")
    byline_xml = f"<ByLine>{escape(byline)}</ByLine>" if byline is not None else ""
    return f"""
  <NewsItem>
    <Identification>
      <NewsIdentifier>
        <ProviderId>pa.press.net</ProviderId>
        <NewsItemId>{escape(item.get("item_id", "PA-0001"))}</NewsItemId>
      </NewsIdentifier>
    </Identification>
    <NewsComponent>
      <NewsLines>
        <HeadLine>{escape(item.get("headline", "Headline"))}</HeadLine>
        {byline_xml}
        <SlugLine>{escape(item.get("slugline", "SLUG"))}</SlugLine>
      </NewsLines>
      <ContentItem>
        <DataContent>
          <body>
            <body.content>{_paragraphs(item.get("paragraphs", ["Body."]))}</body.content>
          </body>
        </DataContent>
      </ContentItem>
    </NewsComponent>
  </NewsItem>"""


def build_legacy_document(
    items: list[dict],
    priority: str | None = "2",
    methode: str | None = "PA_METHODE",
) -> str:
    priority_xml = f"<Priority FormalName={quoteattr(priority)}/>" if priority is not None else ""
    methode_xml = (
        f'<Property FormalName="NIMethodeName" Value={quoteattr(methode)}/>'
        if methode is not None
        else ""
    )
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<NewsML Version="1.2">
  <NewsEnvelope>
    <DateAndTime>20150830T120000+0100</DateAndTime>
    {priority_xml}
  </NewsEnvelope>
  <NewsManagement>
    <Property FormalName="Department" Value="news"/>
    {methode_xml}
  </NewsManagement>{"".join(_legacy_item(item) for item in items)}
</NewsML>"""


def _modern_item(item: dict) -> str:
    guid = item.get("guid", "tag:reuters.com,2015:newsml_L5N11Z1CA")
    return f"""
    <newsItem guid={quoteattr(guid)} version="1">
      <contentMeta>
        <headline>{escape(item.get("headline", "Headline"))}</headline>
        <slugline>{escape(item.get("slugline", "SLUG"))}</slugline>
      </contentMeta>
      <contentSet>
        <inlineXML contenttype="application/xhtml+xml">
          <html xmlns="http://www.w3.org/1999/xhtml">
            <head><title>{escape(item.get("headline", "Headline"))}</title></head>
            <body>{_paragraphs(item.get("paragraphs", ["Body."]))}</body>
          </html>
        </inlineXML>
      </contentSet>
    </newsItem>"""


def build_modern_document(
    items: list[dict],
    priority: str | None = "4",
    methode: str | None = "RTR_METHODE",
) -> str:
    priority_xml = f"<priority>{escape(priority)}</priority>" if priority is not None else ""
    methode_xml = (
        f'<Property FormalName="NIMethodeName" Value={quoteattr(methode)}/>'
        if methode is not None
        else ""
    )
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<newsMessage xmlns="http://iptc.org/std/nar/2006-10-01/">
  <header>
    <sent>2015-08-30T12:00:00Z</sent>
    {priority_xml}
    {methode_xml}
  </header>
  <itemSet>{"".join(_modern_item(item) for item in items)}
  </itemSet>
</newsMessage>"""


@pytest.fixture
def legacy_document():
    return build_legacy_document


@pytest.fixture
def modern_document():
    return build_modern_document


@pytest.fixture
def storm_warning() -> str:
    return build_legacy_document(
        [{
            "headline": "Storm warning",
            "byline": "By Jane Smith",
            "slugline": "WEATHER-UK",
            "item_id": "PA-1234",
            "paragraphs": ["Flooding expected."],
        }],
        priority="2",
    )


@pytest.fixture
def config() -> NotifyConfig:
    return NotifyConfig()
