"""Environment-derived setup configuration."""
from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import urlsplit

from dotenv import load_dotenv

from .lib.env import (
    DEFAULT_CATEGORY_CLASS,
    DEFAULT_INDEX_NAME,
    DEFAULT_LOCALE,
    DEFAULT_PRODUCT_CLASS,
)

HTTP_PREFIX = "http://"
HTTPS_PREFIX = "https://"

_LEADING_INT = re.compile(r"^[+-]?\d+")


@dataclass(frozen=True)
class Configuration:
    pimcore_url: str
    api_key: Optional[str]
    elasticsearch_url: Optional[str]
    elasticsearch_index_name: str
    root_category_id: Optional[int]
    assets_path: Optional[str]
    locale: str
    product_class: str = DEFAULT_PRODUCT_CLASS
    category_class: str = DEFAULT_CATEGORY_CLASS


def normalize_url(url: Optional[str]) -> str:
    """Trim, default the scheme to http:// and end with exactly one slash."""

    url = (url or "").strip()

    if not (url.startswith(HTTP_PREFIX) or url.startswith(HTTPS_PREFIX)):
        url = HTTP_PREFIX + url

    return url.rstrip("/") + "/"


def is_valid_url(url: str) -> bool:
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return parts.scheme in {"http", "https"} and bool(parts.hostname)


def parse_int(value: Optional[str]) -> Optional[int]:
    """Leading-integer coercion: " 12abc" -> 12, "abc" -> None."""

    if value is None:
        return None
    m = _LEADING_INT.match(str(value).strip())
    if not m:
        return None
    return int(m.group(0))


def elasticsearch_url(host: Optional[str], port: Optional[str]) -> Optional[str]:
    if port:
        return f"{host}:{port}/"
    return host


def load_env_file(path: Optional[str] = None) -> bool:
    """Load a .env file without overriding variables already set."""

    return load_dotenv(dotenv_path=path or os.path.join(os.getcwd(), ".env"), override=False)


def configuration_from_env(
    environ: Optional[Mapping[str, str]] = None,
    *,
    index_name: Optional[str] = None,
) -> Configuration:
    env = os.environ if environ is None else environ

    return Configuration(
        pimcore_url=normalize_url(env.get("PIMCORE_URL")),
        api_key=env.get("PIMCORE_API_KEY"),
        elasticsearch_url=elasticsearch_url(env.get("ELASTICSEARCH_HOST"), env.get("ELASTICSEARCH_PORT")),
        elasticsearch_index_name=index_name or env.get("ELASTICSEARCH_INDEX_NAME") or DEFAULT_INDEX_NAME,
        root_category_id=parse_int(env.get("PIMCORE_ROOT_CATEGORY")),
        assets_path=env.get("IMAGES_ASSET_PATH"),
        locale=env.get("PIMCORE_LG_VERSION") or DEFAULT_LOCALE,
        product_class=env.get("PIMCORE_PRODUCT_CLASS") or DEFAULT_PRODUCT_CLASS,
        category_class=env.get("PIMCORE_CATEGORY_CLASS") or DEFAULT_CATEGORY_CLASS,
    )
