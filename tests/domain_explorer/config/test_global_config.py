import json
from pathlib import Path

import pytest

from domain_explorer.config.loader import load_global_config
from domain_explorer.config.model import DEFAULT_SOURCE_URL, GlobalConfig
from domain_explorer.core.exceptions import ConfigError


def _write_global(config_root: Path, data) -> None:
    config_root.mkdir(parents=True, exist_ok=True)
    (config_root / "global.json").write_text(json.dumps(data))


def test_load_global_config_from_file(tmp_path):
    config_root = tmp_path / "config"
    _write_global(
        config_root,
        {
            "ui_title": "Test Explorer",
            "source_url": "https://example.org/list.txt",
            "proxy_url": "",
            "request_timeout_s": 5,
            "items_per_page": 25,
            "page_size_options": [50, 100],
        },
    )

    cfg = load_global_config(config_root, environ={})

    assert cfg.ui_title == "Test Explorer"
    assert cfg.request_timeout_s == 5.0
    assert cfg.items_per_page == 25
    # the default page size is always offered
    assert cfg.page_size_options == [25, 50, 100]
    assert cfg.download_url == "https://example.org/list.txt"
    assert cfg.api_key is None


def test_missing_file_uses_defaults(tmp_path):
    cfg = load_global_config(tmp_path, environ={})
    assert cfg == GlobalConfig()


def test_download_url_goes_through_proxy():
    cfg = GlobalConfig()
    assert cfg.download_url.startswith(cfg.proxy_url)
    assert cfg.download_url.endswith("lista-processo-liberacao.txt")
    assert "%3A%2F%2F" in cfg.download_url


def test_environment_overrides(tmp_path):
    environ = {
        "DOMAIN_EXPLORER_SOURCE_URL": "https://mirror.example/list.txt",
        "DOMAIN_EXPLORER_PROXY_URL": "",
        "GEMINI_API_KEY": "secret",
    }
    cfg = load_global_config(tmp_path, environ=environ)

    assert cfg.source_url == "https://mirror.example/list.txt"
    assert cfg.proxy_url == ""
    assert cfg.download_url == "https://mirror.example/list.txt"
    assert cfg.api_key == "secret"


def test_api_key_fallback_env_var(tmp_path):
    cfg = load_global_config(tmp_path, environ={"API_KEY": "other"})
    assert cfg.api_key == "other"
    assert cfg.source_url == DEFAULT_SOURCE_URL


def test_unknown_keys_are_ignored(tmp_path):
    _write_global(tmp_path, {"ui_title": "X", "default_group": "legacy"})
    assert load_global_config(tmp_path, environ={}).ui_title == "X"


@pytest.mark.parametrize(
    "data",
    [
        {"items_per_page": "many"},
        {"items_per_page": 0},
        {"ui_title": 3},
        {"request_timeout_s": -1},
        {"source_url": ""},
        [1, 2, 3],
    ],
)
def test_invalid_config_raises(tmp_path, data):
    _write_global(tmp_path, data)
    with pytest.raises(ConfigError):
        load_global_config(tmp_path, environ={})


def test_invalid_json_raises(tmp_path):
    (tmp_path / "global.json").write_text("{not json")
    with pytest.raises(ConfigError):
        load_global_config(tmp_path, environ={})
