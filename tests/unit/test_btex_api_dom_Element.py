"""Unit tests for btex.api.dom.Element."""

import pytest

from btex.api.dom.Element import Element, to_html

pytestmark = pytest.mark.dom


class TestElement:
    def test_add_class_sets_attribute(self):
        element = Element("a")
        element.add_class("external")
        assert element.attributes == {"class": "external"}

    def test_add_class_appends_once(self):
        element = Element("span", {"class": "item-header"})
        element.add_class("external")
        element.add_class("item-header")
        assert element.attributes["class"] == "item-header external"

    def test_attribute_order_preserved(self):
        element = Element("a")
        element.add_class("external")
        element.set_attribute("href", "https://example.com/?a=1&b=2")
        element.append("Example")
        assert element.to_html() == '<a class="external" href="https://example.com/?a=1&amp;b=2">Example</a>'

    def test_text_escaped(self):
        assert to_html("a < b") == "a &lt; b"
