"""Tests for notify_newsml.parse_document.detect_dialect module."""

import pytest

from notify_newsml.errors import InvalidDocument
from notify_newsml.models import Dialect
from notify_newsml.parse_document.detect_dialect import detect_dialect, local_name, parse_xml


class TestParseXml:
    def test_parses_string_and_bytes(self) -> None:
        assert local_name(parse_xml("<NewsML/>")) == "newsml"
        assert local_name(parse_xml(b"<newsMessage/>")) == "newsmessage"

    def test_declared_encoding(self) -> None:
        root = parse_xml('<?xml version="1.0" encoding="UTF-8"?><NewsML/>')
        assert local_name(root) == "newsml"

    def test_malformed_xml(self) -> None:
        with pytest.raises(InvalidDocument, match="Malformed XML"):
            parse_xml("<NewsML><NewsItem></NewsML>")

    @pytest.mark.parametrize("text", ["", "   \n", b""])
    def test_empty_input(self, text) -> None:
        with pytest.raises(InvalidDocument, match="Empty document"):
            parse_xml(text)

    def test_does_not_expand_external_entities(self) -> None:
        text = (
            '<?xml version="1.0"?>'
            '<!DOCTYPE NewsML [<!ENTITY xxe SYSTEM "file:///etc/passwd">]>'
            "<NewsML>&xxe;</NewsML>"
        )
        root = parse_xml(text)
        assert "root:" not in "".join(root.itertext())

    def test_text_input_ignores_declared_encoding(self) -> None:
        root = parse_xml('<?xml version="1.0" encoding="ISO-8859-1"?><NewsML>Café</NewsML>')
        assert root.text == "Café"

    def test_bytes_input_uses_declared_encoding(self) -> None:
        text = '<?xml version="1.0" encoding="ISO-8859-1"?><NewsML>Café</NewsML>'
        root = parse_xml(text.encode("iso-8859-1"))
        assert root.text == "Café"


class TestDetectDialect:
    def test_modern_root(self) -> None:
        assert detect_dialect(parse_xml("<newsMessage/>")) is Dialect.MODERN

    def test_legacy_root(self) -> None:
        assert detect_dialect(parse_xml("<NewsML/>")) is Dialect.LEGACY

    def test_namespaced_modern_root(self) -> None:
        root = parse_xml('<newsMessage xmlns="http://iptc.org/std/nar/2006-10-01/"/>')
        assert detect_dialect(root) is Dialect.MODERN

    @pytest.mark.parametrize(
        "text, dialect",
        [("<NEWSMESSAGE/>", Dialect.MODERN), ("<newsml/>", Dialect.LEGACY)],
    )
    def test_root_case_is_ignored(self, text, dialect) -> None:
        assert detect_dialect(parse_xml(text)) is dialect

    def test_unknown_root(self) -> None:
        with pytest.raises(InvalidDocument, match="rss"):
            detect_dialect(parse_xml("<rss><channel/></rss>"))
