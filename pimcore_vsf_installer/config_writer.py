from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .settings import Configuration

logger = logging.getLogger(__name__)

CONFIG_ERROR_MESSAGE = "Can't create storefront config."


class ConfigWriteError(RuntimeError):
    pass


def find_class(classes: Iterable[Dict[str, Any]], name: str) -> Optional[Dict[str, Any]]:
    for cls in classes:
        if isinstance(cls, dict) and cls.get("name") == name:
            return cls
    return None


def _merge_class(section: Dict[str, Any], key: str, classes: Iterable[Dict[str, Any]], name: str) -> None:
    found = find_class(classes, name)
    if found is None:
        raise LookupError(f"Pimcore class {name!r} not found")
    current = section.get(key)
    merged = dict(current) if isinstance(current, dict) else {}
    merged.update(found)
    section[key] = merged


def render_config(template: Dict[str, Any], configuration: Configuration, classes: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """Overlay configuration values on a parsed template (in place) and return it."""

    classes = list(classes)

    es = template.setdefault("elasticsearch", {})
    es["host"] = configuration.elasticsearch_url
    es["indexName"] = configuration.elasticsearch_index_name

    pimcore = template.setdefault("pimcore", {})
    pimcore["url"] = configuration.pimcore_url
    pimcore["assetsPath"] = configuration.assets_path
    pimcore["apiKey"] = configuration.api_key
    pimcore["rootCategoryId"] = configuration.root_category_id
    pimcore["locale"] = configuration.locale

    _merge_class(pimcore, "productClass", classes, configuration.product_class)
    _merge_class(pimcore, "categoryClass", classes, configuration.category_class)

    return template


def dump_config(config: Dict[str, Any]) -> str:
    return json.dumps(config, indent=2, ensure_ascii=False) + "\n"


def write_config(
    configuration: Configuration,
    classes: Iterable[Dict[str, Any]],
    *,
    source_path: str,
    target_path: str,
) -> Path:
    """Write target_path from the source_path template.

    The target is overwritten unconditionally. Any failure (unreadable
    template, missing class, unwritable target) raises ConfigWriteError.
    """

    logger.info("Creating pimcore config %s from %s", target_path, source_path)

    try:
        template = json.loads(Path(source_path).read_text(encoding="utf-8"))
        if not isinstance(template, dict):
            raise ValueError(f"Config template must contain an object: {source_path}")

        config = render_config(template, configuration, classes)

        target = Path(target_path)
        target.write_text(dump_config(config), encoding="utf-8")
    except (OSError, ValueError, LookupError, TypeError) as e:
        logger.exception("Config write failed")
        raise ConfigWriteError(CONFIG_ERROR_MESSAGE) from e

    return target
