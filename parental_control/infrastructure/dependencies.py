"""Dependency injection configuration for hexagonal architecture."""

import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from ..domain.services.access_decision_service import AccessDecisionService
from .catalog.in_memory_catalog import InMemoryContentCatalog
from .config import ParentalControlConfig

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Service container for dependency injection."""

    def __init__(self, config: Optional[ParentalControlConfig] = None):
        """Initialize service container.

        Args:
            config: Service configuration; read from the environment if omitted
        """
        self._config = config or ParentalControlConfig.from_env()
        self._services: Dict[str, Any] = {}
        self._setup_services()

    def _setup_services(self):
        """Setup all services and their dependencies."""
        logger.info("🔧 Setting up service container...")

        if self._config.seed_sample_catalog:
            catalog = InMemoryContentCatalog.with_sample_data()
        else:
            catalog = InMemoryContentCatalog()

        access_decision_service = AccessDecisionService(
            catalog,
            legacy_viewer_name=self._config.legacy_viewer_name,
        )

        self._services = {
            'catalog': catalog,
            'access_decision_service': access_decision_service,
        }

        logger.info("✅ Service container setup completed")

    @property
    def config(self) -> ParentalControlConfig:
        """Get the configuration the container was built from."""
        return self._config

    def get(self, service_name: str) -> Any:
        """Get a service by name.

        Args:
            service_name: Name of the service

        Returns:
            Service instance

        Raises:
            KeyError: If service not found
        """
        if service_name not in self._services:
            raise KeyError(f"Service '{service_name}' not found")
        return self._services[service_name]

    def get_catalog(self) -> InMemoryContentCatalog:
        """Get the content catalog."""
        return self.get('catalog')

    def get_access_decision_service(self) -> AccessDecisionService:
        """Get the access decision service."""
        return self.get('access_decision_service')


# Global service container instance
@lru_cache()
def get_service_container() -> ServiceContainer:
    """Get global service container instance.

    Environment variables are loaded from a .env file first, if one exists.

    Returns:
        Service container instance
    """
    load_dotenv()
    return ServiceContainer()


def get_catalog() -> InMemoryContentCatalog:
    """Get the shared content catalog."""
    return get_service_container().get_catalog()


def get_access_decision_service() -> AccessDecisionService:
    """Get the shared access decision service."""
    return get_service_container().get_access_decision_service()
