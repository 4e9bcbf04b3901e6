from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from .api_client import PimcoreApiClient, PimcoreApiError
from .settings import Configuration, configuration_from_env, is_valid_url

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, Optional[str]], PimcoreApiClient]


@dataclass(frozen=True)
class CollectResult:
    success: bool
    message: Optional[str] = None
    configuration: Optional[Configuration] = None
    classes: List[Dict[str, Any]] = field(default_factory=list)


def default_client_factory(url: str, api_key: Optional[str]) -> PimcoreApiClient:
    return PimcoreApiClient(url, api_key)


def collect_configuration(
    environ: Optional[Mapping[str, str]] = None,
    *,
    client_factory: ClientFactory = default_client_factory,
    index_name: Optional[str] = None,
) -> CollectResult:
    """Build the configuration from the environment and fetch Pimcore classes.

    Failures are encoded in the result; nothing here raises for a bad URL,
    a backend-reported error or an unreachable backend.
    """

    configuration = configuration_from_env(environ, index_name=index_name)

    if not is_valid_url(configuration.pimcore_url):
        logger.warning("Rejected Pimcore url %r", configuration.pimcore_url)
        return CollectResult(success=False, message="Incorrect Pimcore url")

    client = client_factory(configuration.pimcore_url, configuration.api_key)

    try:
        body = client.get("classes")
    except PimcoreApiError:
        logger.exception("Fetching Pimcore classes failed")
        return CollectResult(success=False, message="Invalid Pimcore url or api key")

    if body.get("success") is False:
        logger.warning("Pimcore refused class listing: %s", body.get("msg"))
        return CollectResult(success=False, message=body.get("msg"))

    classes = list(body.get("data") or [])
    logger.info("Pimcore reported %d classes", len(classes))

    return CollectResult(success=True, configuration=configuration, classes=classes)
