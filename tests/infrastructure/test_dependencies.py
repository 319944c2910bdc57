"""Tests for configuration and dependency wiring."""

import pytest

from parental_control.domain.services.access_decision_service import AccessDecisionService
from parental_control.infrastructure.catalog.in_memory_catalog import InMemoryContentCatalog
from parental_control.infrastructure.config import ParentalControlConfig
from parental_control.infrastructure.dependencies import (
    ServiceContainer,
    get_access_decision_service,
    get_catalog,
    get_service_container,
)


def test_config_defaults(monkeypatch):
    """Test configuration defaults with no environment set."""
    monkeypatch.delenv("PARENTAL_CONTROL_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PARENTAL_CONTROL_SEED_SAMPLE_CATALOG", raising=False)
    monkeypatch.delenv("PARENTAL_CONTROL_LEGACY_VIEWER_NAME", raising=False)

    config = ParentalControlConfig.from_env()

    assert config.log_level == "INFO"
    assert config.seed_sample_catalog is True
    assert config.legacy_viewer_name == "legacy_user"


def test_config_from_env(monkeypatch):
    """Test configuration read from environment variables."""
    monkeypatch.setenv("PARENTAL_CONTROL_LOG_LEVEL", "debug")
    monkeypatch.setenv("PARENTAL_CONTROL_SEED_SAMPLE_CATALOG", "false")
    monkeypatch.setenv("PARENTAL_CONTROL_LEGACY_VIEWER_NAME", "kiosk")

    config = ParentalControlConfig.from_env()

    assert config.log_level == "DEBUG"
    assert config.seed_sample_catalog is False
    assert config.legacy_viewer_name == "kiosk"


def test_container_with_sample_catalog():
    """Test the container wires a seeded catalog into the service."""
    container = ServiceContainer(ParentalControlConfig())

    catalog = container.get_catalog()
    service = container.get_access_decision_service()

    assert isinstance(catalog, InMemoryContentCatalog)
    assert len(catalog) == 8
    assert isinstance(service, AccessDecisionService)
    assert service.catalog is catalog


def test_container_without_sample_catalog():
    """Test seeding can be switched off."""
    container = ServiceContainer(ParentalControlConfig(seed_sample_catalog=False))

    assert len(container.get_catalog()) == 0
    assert container.get_access_decision_service().legacy_check("Finding Nemo", "R") == (
        "You can't watch this movie......."
    )


def test_container_unknown_service():
    """Test unknown service names raise."""
    container = ServiceContainer(ParentalControlConfig())

    with pytest.raises(KeyError):
        container.get("unknown")


def test_global_container():
    """Test the global container is shared."""
    get_service_container.cache_clear()
    try:
        assert get_service_container() is get_service_container()
        assert get_catalog() is get_service_container().get_catalog()
        assert get_access_decision_service().catalog is get_catalog()
    finally:
        get_service_container.cache_clear()


def test_config_unknown_log_level_falls_back(monkeypatch):
    """Test an unrecognised log level falls back to INFO."""
    monkeypatch.setenv("PARENTAL_CONTROL_LOG_LEVEL", "verbose")

    config = ParentalControlConfig.from_env()

    assert config.log_level == "INFO"
