"""Test configuration and common fixtures."""

import pytest

from parental_control.domain.models.classification import Classification
from parental_control.domain.models.content_item import ContentItem
from parental_control.domain.models.viewer import Viewer
from parental_control.domain.services.access_decision_service import AccessDecisionService
from parental_control.infrastructure.catalog.in_memory_catalog import InMemoryContentCatalog


@pytest.fixture
def catalog() -> InMemoryContentCatalog:
    """Provide a catalog seeded with the sample titles."""
    return InMemoryContentCatalog.with_sample_data()


@pytest.fixture
def service(catalog: InMemoryContentCatalog) -> AccessDecisionService:
    """Provide a decision service backed by the sample catalog."""
    return AccessDecisionService(catalog)


@pytest.fixture
def child_viewer() -> Viewer:
    """Provide a child limited to PG content."""
    return Viewer("Alice", 8, Classification.PG)


@pytest.fixture
def adult_viewer() -> Viewer:
    """Provide an adult allowed any content."""
    return Viewer("Bob", 25, Classification.R)


@pytest.fixture
def child_item() -> ContentItem:
    """Provide a universally classified item."""
    return ContentItem(1, "Finding Nemo", Classification.U, "Animation", 2003)


@pytest.fixture
def adult_item() -> ContentItem:
    """Provide a restricted item."""
    return ContentItem(2, "The Matrix", Classification.R, "Action", 1999)
