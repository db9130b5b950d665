"""Unit tests for btex.api.ref.bind_reference module."""

import pytest

from btex.api.content.Paragraph import Paragraph
from btex.api.context.Context import Context
from btex.api.ref.bind_reference import bind_reference
from btex.api.ref.ReferenceNode import ReferenceNode
from tests.unit.conftest import make_reference

pytestmark = pytest.mark.ref


class TestUrl:
    """External URL acceptance."""

    def test_https_url_kept_and_collected(self):
        node, document = make_reference("Example", ref_url="https://example.com")
        assert node.url == "https://example.com"
        assert document.external_links == ["https://example.com"]

    def test_http_url_kept(self):
        node, document = make_reference("Example", ref_url="http://example.com/a")
        assert node.url == "http://example.com/a"
        assert document.external_links == ["http://example.com/a"]

    @pytest.mark.parametrize("url", ["ftp://x", "javascript:alert(1)", "https://", "https://-x", "example.com"])
    def test_invalid_url_discarded(self, url):
        node, document = make_reference("Example", ref_url=url)
        assert node.url is None
        assert document.external_links == []

    def test_links_collected_across_scopes(self):
        document = Context()
        for url in ("https://a.org", "https://b.org"):
            scope = document.child()
            scope.set("ref-url", url)
            ReferenceNode(Paragraph("x")).enter(scope)
        assert document.external_links == ["https://a.org", "https://b.org"]


class TestAttributes:
    """Attribute resolution and scoping."""

    def test_reference_attributes(self):
        node, _ = make_reference(
            "Foo",
            ref_page="Foo page",
            ref_key="foo",
            ref_page_suffix="(physics)",
            ref_infer_page="true",
            ref_no_link="true",
        )
        assert node.key == "foo"
        assert node.page_suffix == "(physics)"
        assert node.infer_page is True
        assert node.no_link is True

    def test_reference_attributes_are_not_inherited(self):
        node, _ = make_reference(
            "Foo",
            inherited={"ref-page": "Bar", "ref-key": "bar", "ref-infer-page": "true", "ref-no-link": "true"},
        )
        assert node.page is None
        assert node.key is None
        assert node.infer_page is False
        assert node.no_link is False

    def test_style_is_inherited(self):
        node, _ = make_reference(
            "Foo",
            inherited={"text-italic": "true", "text-bold": "true", "text-size": "14", "text-class-header": "true"},
        )
        assert node.style.italic is True
        assert node.style.bold is True
        assert node.style.font_size == 14.0
        assert node.style.classes == "item-header"

    def test_unset_style(self):
        node, _ = make_reference("Foo", inherited={"text-size": "0", "text-italic": "false"})
        assert node.style.italic is None
        assert node.style.bold is None
        assert node.style.font_size is None
        assert node.style.classes == ""

    def test_bind_directly(self):
        context = Context()
        context.set("ref-key", "k")
        node = ReferenceNode()
        bind_reference(node, context)
        assert node.key == "k"
