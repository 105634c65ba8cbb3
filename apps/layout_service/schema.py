"""GraphQL schema for the layout service.

The SDL mirrors the subset of the Sitecore Experience Edge schema that JSS
apps query in connected mode.  Resolution is done by graphql-core's default
resolvers walking the dumped :class:`LayoutResult` mapping; only the root
``layout`` field needs a function.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from graphql import ExecutionResult, GraphQLSchema, build_schema, graphql_sync

from . import LayoutService

LAYOUT_SDL = """
type Query {
  layout(site: String!, routePath: String!, language: String!): LayoutResult
}

type LayoutResult {
  item: Item
  sitecore: SitecoreLayout
}

type Item {
  rendered: String
}

type SitecoreLayout {
  route: Route
}

type Route {
  name: String
  fields: [Field]
  placeholders: Placeholders
}

type Field {
  name: String
  value: String
}

type Placeholders {
  main: [Component]
}

type Component {
  name: String
  fields: [Field]
}
"""


def build_layout_schema() -> GraphQLSchema:
    return build_schema(LAYOUT_SDL)


class LayoutRoot:
    """Root value exposing ``layout`` to graphql-core's default resolver."""

    def __init__(self, service: LayoutService):
        self.service = service

    def layout(self, info: Any, site: str, routePath: str, language: str) -> Dict[str, Any]:
        return self.service.layout(site, routePath, language).model_dump()


def execute_query(
    schema: GraphQLSchema,
    service: LayoutService,
    query: str,
    variables: Optional[Dict[str, Any]] = None,
    operation_name: Optional[str] = None,
) -> ExecutionResult:
    return graphql_sync(
        schema,
        query,
        root_value=LayoutRoot(service),
        variable_values=variables,
        operation_name=operation_name,
    )
