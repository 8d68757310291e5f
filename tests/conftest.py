"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and the project root on sys.path so `frontend_rules` and the shared
`tests.unit.estree_builders` helpers import without installation.
"""

from collections.abc import Iterator

import pytest

from frontend_rules.infrastructure.di.container import FrontendRulesContainer


@pytest.fixture(autouse=True)
def reset_container() -> Iterator[None]:
    """Each test builds its own container; never leak the process-wide singleton."""
    yield
    FrontendRulesContainer._instance = None
