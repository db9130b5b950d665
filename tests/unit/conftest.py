"""Unit test fixtures.

Most helpers are in tests/conftest.py and re-exported here.
"""

import pytest

from tests.conftest import make_reference, run_cmd

__all__ = ["isolated_home", "make_reference", "run_cmd"]


@pytest.fixture(autouse=True)
def isolated_home(btex_home):
    """Never read the developer's real ~/.btex during unit tests."""
    return btex_home
