"""Pimcore webservice REST client."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 30.0
REST_PREFIX = "webservice/rest/"


class PimcoreApiError(Exception):
    """Transport or protocol failure talking to the Pimcore webservice."""


class PimcoreApiClient:
    def __init__(
        self,
        url: str,
        api_key: Optional[str],
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT_S,
    ):
        self.url = url
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.setdefault("Accept", "application/json")

    def endpoint(self, path: str) -> str:
        return f"{self.url}{REST_PREFIX}{path.lstrip('/')}"

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """GET a webservice resource and return the decoded JSON body.

        The body is returned as-is for non-2xx responses too, since the
        webservice reports errors as ``{"success": false, "msg": ...}``.
        """

        url = self.endpoint(path)
        query = dict(params or {})
        query["apikey"] = self.api_key or ""

        logger.info("GET %s", url)
        try:
            resp = self.session.get(url, params=query, timeout=self.timeout)
        except requests.RequestException as e:
            raise PimcoreApiError(f"Request to {url} failed: {e}") from e

        logger.debug("GET %s -> %s", url, resp.status_code)

        try:
            body = resp.json()
        except ValueError as e:
            raise PimcoreApiError(f"Non-JSON response from {url} (HTTP {resp.status_code})") from e

        if not isinstance(body, dict):
            raise PimcoreApiError(f"Unexpected response shape from {url}: {type(body).__name__}")

        return body
