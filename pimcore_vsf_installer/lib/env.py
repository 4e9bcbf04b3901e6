from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Paths:
    source_config: str = "config.example.json"
    target_config: str = "config.json"
    log_dir: str = "var/log"
    install_log_name: str = "install.log"
    general_log_name: str = "general.log"
    importer_dir: str = "src"


PATHS = Paths()

DEFAULT_INDEX_NAME = "vue_storefront_pimcore"
DEFAULT_LOCALE = "en_GB"
DEFAULT_PRODUCT_CLASS = "Product"
DEFAULT_CATEGORY_CLASS = "ProductCategory"

# `node index.js <command>` is run from PATHS.importer_dir.
DEFAULT_IMPORTER_ARGV = ("node", "index.js")
