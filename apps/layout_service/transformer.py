"""Reshape route documents into the layout result schema."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from lib.contracts.layout import (
    Component,
    FieldValue,
    LayoutResult,
    Placeholders,
    Route,
    RouteDocument,
    SitecoreLayout,
)
from lib.utils.helpers import last_segment, text_of

DEFAULT_ROUTE_NAME = "home"
NOT_FOUND_ROUTE_NAME = "not-found"


def fields_to_list(fields: Optional[Dict[str, Any]]) -> List[FieldValue]:
    return [FieldValue(name=k, value=text_of(v)) for k, v in (fields or {}).items()]


def route_name(document: RouteDocument, route_path: str) -> str:
    if document.name is not None and document.name != "":
        return text_of(document.name)
    return last_segment(route_path) or DEFAULT_ROUTE_NAME


def component_name(value: Any) -> Optional[str]:
    return None if value is None else text_of(value)


def to_route(document: RouteDocument, route_path: str) -> Route:
    """Convert ``document`` into a :class:`Route`.

    Only the ``jss-main`` slot (or ``main`` when ``jss-main`` is absent) is
    rendered, and it is always emitted as ``placeholders.main``.
    """

    components = [
        Component(
            name=component_name(comp.componentName),
            fields=fields_to_list(comp.fields),
        )
        for comp in document.main_components()
    ]
    return Route(
        name=route_name(document, route_path),
        fields=fields_to_list(document.fields),
        placeholders=Placeholders(main=components),
    )


def not_found_route() -> Route:
    return Route(
        name=NOT_FOUND_ROUTE_NAME,
        fields=[FieldValue(name="pageTitle", value="Not Found")],
        placeholders=Placeholders(main=[]),
    )


def wrap(route: Route) -> LayoutResult:
    return LayoutResult(sitecore=SitecoreLayout(route=route))
