from pathlib import Path

import pytest
import yaml

from apps.layout_service import LayoutService
from lib.config.layout_service_loader import ServiceConfig


@pytest.fixture
def store(tmp_path: Path) -> Path:
    return tmp_path / "routes"


@pytest.fixture
def write_route(store: Path):
    """Write a route document for ``route_path``/``language`` under ``store``."""

    def _write(route_path: str, language: str, document) -> Path:
        rel = route_path.strip("/")
        folder = store / rel if rel else store
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / f"{language}.yml"
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(document, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def service(store: Path) -> LayoutService:
    return LayoutService(config=ServiceConfig(data_root=str(store)))
