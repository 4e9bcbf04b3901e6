from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import pytest

from pimcore_vsf_installer.settings import Configuration

CLASSES: List[Dict[str, Any]] = [
    {"id": "12", "name": "Product", "creationDate": 1520000000},
    {"id": "13", "name": "ProductCategory", "creationDate": 1520000001},
    {"id": "14", "name": "Manufacturer"},
]


class FakeClient:
    def __init__(self, body: Dict[str, Any] | None = None, exc: Exception | None = None):
        self.body = body
        self.exc = exc
        self.calls: List[str] = []

    def get(self, path: str, params=None) -> Dict[str, Any]:
        self.calls.append(path)
        if self.exc is not None:
            raise self.exc
        return self.body or {}


@pytest.fixture
def env() -> Dict[str, str]:
    return {
        "PIMCORE_URL": "pimcore.local",
        "PIMCORE_API_KEY": "secret-key",
        "ELASTICSEARCH_HOST": "http://localhost",
        "ELASTICSEARCH_PORT": "9200",
        "PIMCORE_ROOT_CATEGORY": "11148",
        "IMAGES_ASSET_PATH": "/var/assets",
    }


@pytest.fixture
def classes() -> List[Dict[str, Any]]:
    return [dict(c) for c in CLASSES]


@pytest.fixture
def configuration() -> Configuration:
    return Configuration(
        pimcore_url="http://pimcore.local/",
        api_key="secret-key",
        elasticsearch_url="http://localhost:9200/",
        elasticsearch_index_name="vue_storefront_pimcore",
        root_category_id=11148,
        assets_path="/var/assets",
        locale="en_GB",
    )


@pytest.fixture
def template_path(tmp_path: Path) -> Path:
    p = tmp_path / "config.example.json"
    src = Path(__file__).resolve().parents[1] / "config.example.json"
    p.write_text(src.read_text(encoding="utf-8"), encoding="utf-8")
    return p


@pytest.fixture
def template(template_path: Path) -> Dict[str, Any]:
    return json.loads(template_path.read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def restore_root_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    yield
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
