"""Environment parsing and URL normalization."""

import pytest

from pimcore_vsf_installer.settings import (
    configuration_from_env,
    elasticsearch_url,
    is_valid_url,
    normalize_url,
    parse_int,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("example.com", "http://example.com/"),
        ("https://example.com/", "https://example.com/"),
        ("http://example.com", "http://example.com/"),
        ("  pimcore.local:8080/  ", "http://pimcore.local:8080/"),
        ("https://example.com/api//", "https://example.com/api/"),
    ],
)
def test_normalize_url(raw, expected):
    assert normalize_url(raw) == expected


def test_normalize_url_keeps_https_scheme():
    assert normalize_url("https://shop.example.com").startswith("https://")


def test_is_valid_url():
    assert is_valid_url("http://pimcore.local/")
    assert not is_valid_url(normalize_url(""))
    assert not is_valid_url("ftp://pimcore.local/")


def test_parse_int_leading_digits():
    assert parse_int("11148") == 11148
    assert parse_int(" 12abc") == 12
    assert parse_int("abc") is None
    assert parse_int(None) is None


def test_elasticsearch_url_with_and_without_port():
    assert elasticsearch_url("http://localhost", "9200") == "http://localhost:9200/"
    assert elasticsearch_url("http://localhost:9200", None) == "http://localhost:9200"


def test_configuration_defaults(env):
    cfg = configuration_from_env(env)

    assert cfg.pimcore_url == "http://pimcore.local/"
    assert cfg.elasticsearch_url == "http://localhost:9200/"
    assert cfg.elasticsearch_index_name == "vue_storefront_pimcore"
    assert cfg.root_category_id == 11148
    assert cfg.locale == "en_GB"
    assert cfg.product_class == "Product"
    assert cfg.category_class == "ProductCategory"


def test_configuration_overrides(env):
    env["PIMCORE_LG_VERSION"] = "de_DE"
    env["ELASTICSEARCH_INDEX_NAME"] = "from_env"

    assert configuration_from_env(env).locale == "de_DE"
    assert configuration_from_env(env).elasticsearch_index_name == "from_env"
    assert configuration_from_env(env, index_name="from_cli").elasticsearch_index_name == "from_cli"
