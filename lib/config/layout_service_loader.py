from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .yaml_loader import load_yaml

DEFAULT_CONFIG_PATH = "config/layout_service.yaml"
DEFAULT_ENDPOINT = "/sitecore/api/graph/edge"


@dataclass
class HttpConfig:
    host: str = "0.0.0.0"
    port: int = 4000
    endpoint: str = DEFAULT_ENDPOINT
    graphiql: bool = True
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


@dataclass
class ServiceConfig:
    """Typed view over ``layout_service.yaml``.

    Every key is optional; anything missing falls back to the defaults the
    mock server has always used (``data/routes``, ``.yml`` documents, port
    4000).  The raw mapping is retained for callers that need keys not
    modelled here.
    """

    data_root: str = "data/routes"
    document_extension: str = "yml"
    http: HttpConfig = field(default_factory=HttpConfig)
    log_level: str = "INFO"
    raw: Dict[str, Any] = field(default_factory=dict)


def parse_service_config(raw: Dict[str, Any]) -> ServiceConfig:
    """Build a :class:`ServiceConfig` from an already loaded mapping."""

    svc = raw.get("layout_service", {}) or {}
    http = svc.get("http", {}) or {}
    defaults = HttpConfig()
    return ServiceConfig(
        data_root=str(svc.get("data_root", "data/routes")),
        document_extension=str(svc.get("document_extension", "yml")).lstrip("."),
        http=HttpConfig(
            host=str(http.get("host", defaults.host)),
            port=int(http.get("port", defaults.port)),
            endpoint=str(http.get("endpoint", defaults.endpoint)),
            graphiql=bool(http.get("graphiql", defaults.graphiql)),
            cors_origins=list(http.get("cors_origins", defaults.cors_origins)),
        ),
        log_level=str((svc.get("logging", {}) or {}).get("level", "INFO")),
        raw=raw,
    )


def load_service_config(path: Optional[str] = None) -> ServiceConfig:
    """Load ``layout_service.yaml`` and return a :class:`ServiceConfig`.

    Parameters
    ----------
    path:
        File system path to the YAML configuration file.  When the file does
        not exist the defaults are returned.
    """

    path = path or DEFAULT_CONFIG_PATH
    if not Path(path).exists():
        return ServiceConfig()
    return parse_service_config(load_yaml(path))
