"""Mock layout service.

:class:`LayoutService` answers ``layout(site, routePath, language)`` queries
the way the Sitecore JSS layout service does, but from YAML files on disk
instead of a content backend.  Front-end developers point their apps at it to
work without a real Sitecore instance.

The service holds no per-request state.  Every call reads the route file
fresh, so edits to ``data/routes`` show up on the next request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from lib.config.layout_service_loader import (
    DEFAULT_CONFIG_PATH,
    ServiceConfig,
    load_service_config,
)
from lib.contracts.layout import LayoutResult
from lib.telemetry.logger import get_logger
from lib.utils.validation import ensure_text

from .errors import InvalidQuery, LayoutServiceError, MalformedDocument
from .resolver import DocumentLookup, FileSystemDocumentStore, RouteResolver
from .transformer import not_found_route, to_route, wrap

logger = get_logger(__name__)


@dataclass
class LayoutService:
    """Resolve and render route layouts.

    Parameters
    ----------
    config: optional :class:`ServiceConfig`.  When omitted it is loaded from
        ``config_path``; a missing file yields the defaults.
    lookup: optional document lookup.  Defaults to a
        :class:`FileSystemDocumentStore` rooted at ``config.data_root``.
    """

    config: Optional[ServiceConfig] = field(default=None)
    config_path: str = DEFAULT_CONFIG_PATH
    lookup: Optional[DocumentLookup] = field(default=None)
    resolver: RouteResolver = field(init=False)

    def __post_init__(self) -> None:
        if self.config is None:
            self.config = load_service_config(self.config_path)
        if self.lookup is None:
            self.lookup = FileSystemDocumentStore(
                self.config.data_root, self.config.document_extension
            )
        self.resolver = RouteResolver(self.lookup)

    def layout(self, site: str, routePath: str, language: str) -> LayoutResult:
        """Return the layout for a route, or the not-found layout."""

        ensure_text(site, "site", InvalidQuery)
        ensure_text(routePath, "routePath", InvalidQuery)
        ensure_text(language, "language", InvalidQuery)
        logger.info(
            "Request for site=%s, routePath=%s, language=%s", site, routePath, language
        )

        document = self.resolver.resolve(site, routePath, language)
        if document is None:
            logger.info("No route document for %s (%s)", routePath, language)
            return wrap(not_found_route())

        result = wrap(to_route(document, routePath))
        logger.debug("Layout for %s (%s): %s", routePath, language, result.model_dump())
        return result


__all__ = [
    "InvalidQuery",
    "LayoutService",
    "LayoutServiceError",
    "MalformedDocument",
]
