"""Global pytest configuration.

Restores the pathsearch logging and search configuration after every test so
tests that enable debug output or change progress intervals do not leak into
others.
"""

from __future__ import annotations

import pytest

from pathsearch.config import SEARCH_CONFIG
from pathsearch.logging import disable_debug_logging


@pytest.fixture(autouse=True)
def _restore_global_state():
    interval = SEARCH_CONFIG.progress_interval
    yield
    SEARCH_CONFIG.progress_interval = interval
    disable_debug_logging()
