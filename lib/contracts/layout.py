"""Layout service contracts.

Two families of models live here.  ``RouteDocument`` and
``ComponentDocument`` describe the loosely typed YAML files in the document
store; every key is optional.  ``LayoutResult`` and its children describe the
fixed shape handed back to callers, where every field value is text and the
``fields`` and ``placeholders.main`` lists are always present.
"""
from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lib.utils.helpers import text_of

# Placeholder slots the layout service understands, in order of precedence.
RECOGNIZED_SLOTS = ("jss-main", "main")

Scalar = Union[bool, int, float, str, dt.datetime, dt.date, None]


class _DocumentModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @field_validator("fields", mode="before", check_fields=False)
    @classmethod
    def _text_keys(cls, value: Any) -> Any:
        # YAML keys such as `2024:` or `true:` load as non-text scalars.
        if isinstance(value, dict):
            return {k if isinstance(k, str) else text_of(k): v for k, v in value.items()}
        return value


class ComponentDocument(_DocumentModel):
    """A component entry inside a placeholder list."""

    componentName: Scalar = None
    fields: Optional[Dict[str, Scalar]] = None


class RouteDocument(_DocumentModel):
    """Parsed route file from the document store."""

    name: Scalar = None
    fields: Optional[Dict[str, Scalar]] = None
    placeholders: Optional[Dict[str, Optional[List[ComponentDocument]]]] = None

    @field_validator("placeholders", mode="before")
    @classmethod
    def _keep_recognized_slots(cls, value: Any) -> Any:
        # Unrecognized slots are never rendered, so their contents are not
        # validated either.
        if isinstance(value, dict):
            return {k: v for k, v in value.items() if k in RECOGNIZED_SLOTS}
        return {}

    def main_components(self) -> List[ComponentDocument]:
        """Return the ``jss-main`` slot, falling back to ``main``."""

        slots = self.placeholders or {}
        for slot in RECOGNIZED_SLOTS:
            components = slots.get(slot)
            if components is not None:
                return components
        return []


class FieldValue(BaseModel):
    name: str
    value: str


class Component(BaseModel):
    name: Optional[str] = None
    fields: List[FieldValue] = Field(default_factory=list)


class Placeholders(BaseModel):
    main: List[Component] = Field(default_factory=list)


class Route(BaseModel):
    name: str
    fields: List[FieldValue] = Field(default_factory=list)
    placeholders: Placeholders = Field(default_factory=Placeholders)


class SitecoreLayout(BaseModel):
    route: Route


class Item(BaseModel):
    rendered: Optional[str] = None


class LayoutResult(BaseModel):
    """Top-level value returned by ``layout``."""

    item: Optional[Item] = None
    sitecore: SitecoreLayout
