"""Service for deciding whether a viewer may access content."""

import logging

from ..models.classification import Classification
from ..models.content_item import ContentItem
from ..models.verdict import Verdict
from ..models.viewer import Viewer
from ..ports.content_catalog import ContentCatalog

logger = logging.getLogger(__name__)

LEGACY_ALLOWED_MESSAGE = "You have permission for this movie"
LEGACY_DENIED_MESSAGE = "You can't watch this movie......."
LEGACY_VIEWER_AGE = 18


class AccessDecisionService:
    """Domain service for access decisions.

    Content is accessible exactly when its classification is no more
    restrictive than the viewer's ceiling. Ages are never compared.
    """

    def __init__(self, catalog: ContentCatalog, legacy_viewer_name: str = "legacy_user"):
        """Initialize the service.

        Args:
            catalog: Catalog used to resolve titles
            legacy_viewer_name: Name of the synthetic viewer used by legacy_check
        """
        self._catalog = catalog
        self._legacy_viewer_name = legacy_viewer_name
        logger.info("🔧 AccessDecisionService initialized")

    @property
    def catalog(self) -> ContentCatalog:
        """Get the catalog backing title resolution."""
        return self._catalog

    def decide(self, viewer: Viewer, item: ContentItem) -> Verdict:
        """Decide whether a viewer may access a content item.

        Args:
            viewer: Viewer requesting access
            item: Content being requested

        Returns:
            Verdict with the decision and its reason

        Raises:
            ValueError: If viewer or item is None
        """
        if viewer is None:
            logger.error("❌ Access check failed: viewer is null")
            raise ValueError("Viewer cannot be null")
        if item is None:
            logger.error("❌ Access check failed: content item is null")
            raise ValueError("Content item cannot be null")

        classification = item.classification
        ceiling = viewer.ceiling

        if classification.is_accessible_under(ceiling):
            logger.info(f"✅ Access granted: {viewer.name} can watch '{item.title}' (rating: {classification})")
            return Verdict.allow(
                f"Access granted. You can watch '{item.title}' (rated {classification.label})"
            )

        logger.info(
            f"🚫 Access denied: {viewer.name} cannot watch '{item.title}' "
            f"(rating: {classification}, ceiling: {ceiling})"
        )
        return Verdict.deny(
            f"Access denied. '{item.title}' is rated {classification.label}, "
            f"but your maximum allowed rating is {ceiling.label}"
        )

    def decide_by_title(self, viewer: Viewer, title: str) -> Verdict:
        """Resolve a title through the catalog and decide access.

        A title the catalog does not know yields a denial, not an error.

        Args:
            viewer: Viewer requesting access
            title: Title of the requested content

        Returns:
            Verdict with the decision and its reason

        Raises:
            ValueError: If viewer is None or title is None or blank
        """
        if viewer is None:
            logger.error("❌ Access check failed: viewer is null")
            raise ValueError("Viewer cannot be null")
        if title is None or not title.strip():
            logger.error("❌ Access check failed: title is null or empty")
            raise ValueError("Content title cannot be null or empty")

        item = self._catalog.find_by_title(title)
        if item is None:
            logger.warning(f"⚠️ Content not found for access check: {title} (viewer: {viewer.name})")
            return Verdict.deny(f"Content not found: {title}")

        return self.decide(viewer, item)

    def legacy_check(self, title: str, classification_text: str) -> str:
        """Check access with the legacy string-in, string-out contract.

        Deprecated: use decide_by_title() instead. This method never raises.

        Args:
            title: Title of the requested content
            classification_text: Ceiling as free text, e.g. "PG"

        Returns:
            Fixed permission or refusal message, or "Error: <message>"
        """
        logger.warning("⚠️ Using deprecated legacy_check method - use decide_by_title() instead")

        try:
            ceiling = Classification.parse(classification_text)
            viewer = Viewer(name=self._legacy_viewer_name, age=LEGACY_VIEWER_AGE, ceiling=ceiling)
            verdict = self.decide_by_title(viewer, title)
        except Exception as e:
            logger.error(f"❌ Error in legacy check: {e}")
            return f"Error: {e}"

        return LEGACY_ALLOWED_MESSAGE if verdict.allowed else LEGACY_DENIED_MESSAGE
