"""Shared pytest configuration and fixtures for all tests."""

import pytest

from btex.api.content.Paragraph import Paragraph
from btex.api.context.Context import Context
from btex.api.ref.ReferenceNode import ReferenceNode


def pytest_configure(config):
    for marker in ("unit", "ref", "config", "context", "content", "dom", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def make_reference(text: str = "", inherited: dict | None = None, **attributes: str) -> tuple[ReferenceNode, Context]:
    """Enter a reference into a fresh two-level context and normalise it.

    ``attributes`` are declared on the reference scope with underscores
    mapped to dashes (``ref_page`` -> ``ref-page``).
    """
    document = Context()
    for name, value in (inherited or {}).items():
        document.set(name, value)
    scope = document.child()
    for name, value in attributes.items():
        scope.set(name.replace("_", "-"), value)

    node = ReferenceNode(Paragraph(text))
    node.enter(scope)
    node.normalise()
    return node, document


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def btex_home(tmp_path, monkeypatch):
    """Point BTEX_HOME at an empty temporary directory."""
    monkeypatch.setenv("BTEX_HOME", str(tmp_path))
    return tmp_path
