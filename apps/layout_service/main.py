"""HTTP entry point for the mock layout service.

The GraphQL endpoint lives at the path JSS apps expect from Sitecore
Experience Edge and delegates every query to :class:`LayoutService`.  A GET
without a query serves GraphiQL so the schema can be explored in a browser.
``/layout`` returns the same result as plain JSON for quick curl checks.

Run with ``python -m apps.layout_service.main``.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from graphql import ExecutionResult
from pydantic import BaseModel

from apps.layout_service import InvalidQuery, LayoutService, MalformedDocument
from apps.layout_service.schema import build_layout_schema, execute_query
from lib.config.layout_service_loader import DEFAULT_CONFIG_PATH
from lib.telemetry.logger import configure_logging, get_logger

logger = get_logger(__name__)

GRAPHIQL_HTML = """<!DOCTYPE html>
<html>
  <head>
    <title>Layout service GraphiQL</title>
    <link rel="stylesheet" href="https://unpkg.com/graphiql@3/graphiql.min.css" />
  </head>
  <body style="margin: 0;">
    <div id="graphiql" style="height: 100vh;"></div>
    <script crossorigin src="https://unpkg.com/react@18/umd/react.production.min.js"></script>
    <script crossorigin src="https://unpkg.com/react-dom@18/umd/react-dom.production.min.js"></script>
    <script crossorigin src="https://unpkg.com/graphiql@3/graphiql.min.js"></script>
    <script>
      const fetcher = GraphiQL.createFetcher({ url: window.location.pathname });
      ReactDOM.createRoot(document.getElementById("graphiql")).render(
        React.createElement(GraphiQL, { fetcher: fetcher })
      );
    </script>
  </body>
</html>
"""


class GraphQLRequest(BaseModel):
    """Standard GraphQL-over-HTTP POST body."""

    query: Optional[str] = None
    variables: Optional[Dict[str, Any]] = None
    operationName: Optional[str] = None


def _graphql_response(result: ExecutionResult, path: str) -> JSONResponse:
    for err in result.errors or []:
        logger.error(
            "GraphQL error on %s: %s",
            path,
            err.message,
            exc_info=err.original_error,
        )
    # Parse and validation failures never reach execution and carry no data.
    status = 400 if result.data is None and result.errors else 200
    return JSONResponse(status_code=status, content=result.formatted)


def _missing_query() -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"errors": [{"message": "Must provide query string."}]},
    )


def create_app(service: LayoutService) -> FastAPI:
    """Build the FastAPI application around ``service``."""

    http = service.config.http
    schema = build_layout_schema()
    app = FastAPI(title="Mock layout service")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=http.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(MalformedDocument)
    async def malformed_document(request: Request, exc: MalformedDocument):
        logger.error("Malformed route document on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal error", "type": type(exc).__name__},
        )

    @app.exception_handler(InvalidQuery)
    async def invalid_query(request: Request, exc: InvalidQuery):
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.post(http.endpoint)
    def graphql_post(req: GraphQLRequest, request: Request):
        """Execute a GraphQL query sent as JSON."""

        if not req.query:
            return _missing_query()
        result = execute_query(
            schema, service, req.query, req.variables, req.operationName
        )
        return _graphql_response(result, request.url.path)

    @app.get(http.endpoint)
    def graphql_get(
        request: Request,
        query: Optional[str] = None,
        variables: Optional[str] = None,
        operationName: Optional[str] = None,
    ):
        """Execute a GraphQL query from the URL, or serve GraphiQL."""

        if not query:
            if http.graphiql:
                return HTMLResponse(GRAPHIQL_HTML)
            return _missing_query()
        try:
            parsed = json.loads(variables) if variables else None
        except json.JSONDecodeError:
            return JSONResponse(
                status_code=400,
                content={"errors": [{"message": "Variables are invalid JSON."}]},
            )
        result = execute_query(schema, service, query, parsed, operationName)
        return _graphql_response(result, request.url.path)

    @app.get("/layout")
    def layout(
        site: str,
        language: str,
        route_path: str = Query(..., alias="routePath"),
    ):
        """Return the layout for a route as plain JSON."""

        return service.layout(site, route_path, language).model_dump()

    return app


config_path = os.environ.get("LAYOUT_SERVICE_CONFIG", DEFAULT_CONFIG_PATH)
service = LayoutService(config_path=config_path)
app = create_app(service)


if __name__ == "__main__":
    import uvicorn

    configure_logging(service.config.log_level)
    logger.info(
        "Mock GraphQL running at http://localhost:%s%s",
        service.config.http.port,
        service.config.http.endpoint,
    )
    uvicorn.run(app, host=service.config.http.host, port=service.config.http.port)
