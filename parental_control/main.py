"""Main script for running the parental control demo."""

import logging

from dotenv import load_dotenv

from .domain.models.classification import Classification
from .domain.models.viewer import Viewer
from .domain.services.access_decision_service import AccessDecisionService
from .infrastructure.config import ParentalControlConfig
from .infrastructure.dependencies import ServiceContainer


def check_access(service: AccessDecisionService, viewer: Viewer, title: str) -> None:
    """Print the outcome of a single access check."""
    print(f"Viewer: {viewer.name} (age {viewer.age}, max rating: {viewer.ceiling.label})")
    print(f"Title: {title}")

    try:
        verdict = service.decide_by_title(viewer, title)
        print(f"Result: {verdict.reason}")
    except ValueError as e:
        print(f"Error: {e}")
    print()


def main():
    """Run the parental control demo."""
    load_dotenv()
    config = ParentalControlConfig.from_env()

    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logger = logging.getLogger(__name__)
    logger.info("🚀 Starting parental control demo")

    container = ServiceContainer(config)
    service = container.get_access_decision_service()
    catalog = container.get_catalog()

    child = Viewer.with_default_ceiling("Alice", 8)
    teenager = Viewer.with_default_ceiling("Bob", 15)
    adult = Viewer("Charlie", 25, Classification.EIGHTEEN)
    restricted_adult = Viewer("Diana", 30, Classification.PG)

    print("=== Parental Control Demo ===\n")

    check_access(service, child, "Baby's Day Out")
    check_access(service, child, "The Matrix")
    check_access(service, teenager, "Inception")
    check_access(service, teenager, "Deadpool")
    check_access(service, adult, "The Dark Knight")
    check_access(service, restricted_adult, "Finding Nemo")
    check_access(service, restricted_adult, "The Matrix")

    print("=== Unknown Title ===")
    check_access(service, child, "NonExistentMovie")

    print("=== Catalog Statistics ===")
    for classification, count in catalog.count_by_classification().items():
        print(f"{classification.label}: {count} titles")

    print("\n=== Legacy Check ===")
    legacy_result = service.legacy_check("Baby's Day Out", "PG")
    print(f"Legacy result: {legacy_result}")

    logger.info("✅ Parental control demo completed")


if __name__ == "__main__":
    main()
