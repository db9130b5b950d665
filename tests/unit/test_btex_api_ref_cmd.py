"""Unit tests for btex.api.ref.cmd_infer and cmd_render."""

import json

import pytest

from btex.api.config.cmd_show import cmd_show
from btex.api.ref.cmd_infer import cmd_infer
from btex.api.ref.cmd_render import cmd_render
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.ref


class TestCmdInfer:
    def test_infer(self):
        result = run_cmd(cmd_infer, "Ω meson")
        assert result.success is True
        assert result.output["page"] == "Omega meson"
        assert result.output["spacing"] == {"first": "letter", "last": "letter"}

    def test_infer_with_cjk_suffix(self):
        result = run_cmd(cmd_infer, "量子", suffix="力学")
        assert result.output["page"] == "量子力学"

    def test_empty_identifier_fails(self):
        result = run_cmd(cmd_infer, "__")
        assert result.success is False
        assert result.output["page"] == ""


class TestCmdRender:
    def test_external(self):
        result = run_cmd(cmd_render, "Example", url="https://example.com")
        assert result.success is True
        assert result.output["kind"] == "external_url"
        assert result.output["external_links"] == ["https://example.com"]
        assert result.output["html"] == '<span><a class="external" href="https://example.com">Example</a></span>'

    def test_target_wins(self):
        result = run_cmd(cmd_render, "x", url="https://example.com", target_id="sec:1", target_text="Section 1")
        assert result.output["kind"] == "target"
        assert result.output["html"] == '<span><a href="#sec%3A1">Section 1</a></span>'

    def test_inferred_category(self):
        result = run_cmd(cmd_render, "Category: Foo", infer_page=True)
        assert result.output["kind"] == "lookup"
        assert result.output["page"] == "Category: Foo"
        assert result.output["html"] == '<btex-link data-page="Category: Foo" data-is-category="True"></btex-link>'

    def test_config_limits_font_size(self, btex_home):
        (btex_home / "config.json").write_text(json.dumps({"render": {"min_font_size": 10, "max_font_size": 12}}))
        result = run_cmd(cmd_render, page="Foo", no_link=True, size=30)
        assert result.output["html"] == '<span style="font-size:12px"><btex-ref data-page="Foo"></btex-ref></span>'

    def test_invalid_config(self, btex_home):
        (btex_home / "config.json").write_text("{")
        result = run_cmd(cmd_render, "Foo", page="Foo")
        assert result.success is False
        assert result.output["errors"]

    def test_inverted_font_size_range(self, btex_home):
        (btex_home / "config.json").write_text(json.dumps({"render": {"min_font_size": 80, "max_font_size": 10}}))
        result = run_cmd(cmd_render, "x", page="X")
        assert result.success is False
        assert "must not exceed" in result.output["errors"][0]
        assert result.output["html"] == ""
        assert result.output["kind"] == ""


class TestCmdShow:
    def test_defaults(self, btex_home):
        result = run_cmd(cmd_show)
        assert result.success is True
        assert result.result == "Using defaults"
        assert result.output["content"]["render"]["max_font_size"] == 72.0

    def test_inverted_font_size_range(self, btex_home):
        (btex_home / "config.json").write_text(json.dumps({"render": {"min_font_size": 80, "max_font_size": 10}}))
        result = run_cmd(cmd_show)
        assert result.success is False
        assert result.output["content"] == {}
        assert result.output["config_path"].endswith("config.json")
        assert "must not exceed" in result.result
