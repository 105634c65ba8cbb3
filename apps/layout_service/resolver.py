"""Route resolution against the document store.

A route path such as ``/about/team`` and a language such as ``en`` map to
``<data_root>/about/team/en.yml``; the root path ``/`` maps to
``<data_root>/en.yml``.  Reading the file is delegated to a *document
lookup*, any callable taking ``(segments, language)`` and returning the
parsed mapping or ``None``.  :class:`FileSystemDocumentStore` is the lookup
used in production; tests can pass a plain function instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence

import yaml
from pydantic import ValidationError

from lib.config.yaml_loader import load_yaml_raw
from lib.contracts.layout import RouteDocument
from lib.telemetry.logger import get_logger
from lib.utils.helpers import route_segments

from .errors import MalformedDocument

logger = get_logger(__name__)

DocumentLookup = Callable[[Sequence[str], str], Optional[Any]]


@dataclass
class FileSystemDocumentStore:
    """Per-language YAML documents laid out by route path under ``root``."""

    root: Path
    extension: str = "yml"

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        self.extension = self.extension.lstrip(".")

    def location(self, segments: Sequence[str], language: str) -> Path:
        return self.root.joinpath(*segments, f"{language}.{self.extension}")

    def _inside_root(self, path: Path) -> bool:
        try:
            path.resolve().relative_to(self.root.resolve())
        except ValueError:
            return False
        return True

    def __call__(self, segments: Sequence[str], language: str) -> Optional[Any]:
        path = self.location(segments, language)
        if not self._inside_root(path):
            logger.warning("Route path escapes the document store: %s", path)
            return None
        if not path.is_file():
            return None
        try:
            return load_yaml_raw(path)
        except yaml.YAMLError as exc:
            raise MalformedDocument(str(path), str(exc)) from exc


class RouteResolver:
    """Load the :class:`RouteDocument` for a route, if one exists."""

    def __init__(self, lookup: DocumentLookup):
        self.lookup = lookup

    def resolve(self, site: str, route_path: str, language: str) -> Optional[RouteDocument]:
        """Return the route document or ``None`` when the store has none.

        ``site`` is accepted for interface compatibility only; all sites share
        one store.
        """

        segments: List[str] = route_segments(route_path)
        raw = self.lookup(segments, language)
        if raw is None:
            return None
        location = "/".join([*segments, language])
        if not isinstance(raw, dict):
            raise MalformedDocument(
                location, f"expected a mapping, got {type(raw).__name__}"
            )
        try:
            return RouteDocument.model_validate(raw)
        except ValidationError as exc:
            raise MalformedDocument(location, str(exc)) from exc
