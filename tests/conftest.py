"""
Pytest configuration and fixtures.

For shared catalog data, see tests/fixtures/catalog_fixtures.py
"""

import pytest

from match_engine.config_loader import ScorerConfig
from tests.fixtures.catalog_fixtures import DEMO_CANDIDATES, DEMO_QUESTIONS


@pytest.fixture
def demo_questions():
    return list(DEMO_QUESTIONS)


@pytest.fixture
def demo_candidates():
    return list(DEMO_CANDIDATES)


@pytest.fixture
def scorer_config():
    return ScorerConfig()
