from __future__ import annotations

import json
import logging
import os
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from domain_explorer.config.model import GlobalConfig
from domain_explorer.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

GLOBAL_CONFIG_FILE = "global.json"

API_KEY_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")
SOURCE_URL_ENV = "DOMAIN_EXPLORER_SOURCE_URL"
PROXY_URL_ENV = "DOMAIN_EXPLORER_PROXY_URL"

_INT_FIELDS = {"default_min_length", "default_max_length", "items_per_page", "max_upload_bytes"}
_FLOAT_FIELDS = {"request_timeout_s"}
_STR_FIELDS = {
    "ui_title",
    "subtitle",
    "source_url",
    "proxy_url",
    "semantic_model",
    "export_filename",
    "availability_url",
}


def load_global_config(
        root: Path,
        environ: Optional[Mapping[str, str]] = None,
) -> GlobalConfig:
    """
    Load <root>/global.json into a GlobalConfig and apply environment overrides.

    A missing file is not fatal (defaults are used); malformed JSON or values
    of the wrong type raise ConfigError.
    """
    root = Path(root)
    environ = os.environ if environ is None else environ

    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / GLOBAL_CONFIG_FILE
    raw: Dict[str, Any] = {}
    if global_path.is_file():
        try:
            with global_path.open(encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{global_path} must contain a JSON object")
    else:
        logger.warning(f"Global config not found at {global_path}, using defaults")

    cfg = GlobalConfig(**_coerce(raw, global_path))

    # Environment overrides
    if environ.get(SOURCE_URL_ENV):
        cfg.source_url = environ[SOURCE_URL_ENV]
    if PROXY_URL_ENV in environ:
        # An empty value disables the proxy
        cfg.proxy_url = environ[PROXY_URL_ENV]
    cfg.api_key = next((environ[k] for k in API_KEY_ENV_VARS if environ.get(k)), None)

    _validate(cfg, global_path)

    logger.info(
        "Global config loaded",
        extra={
            "source_url": cfg.source_url,
            "proxy_enabled": bool(cfg.proxy_url),
            "semantic_search_enabled": bool(cfg.api_key),
        },
    )
    return cfg


def _coerce(raw: Dict[str, Any], path: Path) -> Dict[str, Any]:
    known = {f.name for f in fields(GlobalConfig)} - {"api_key"}
    unknown = sorted(set(raw) - known)
    if unknown:
        logger.warning(f"Ignoring unknown keys in {path.name}: {unknown}")

    out: Dict[str, Any] = {}
    for key, value in raw.items():
        if key not in known:
            continue
        try:
            if key in _INT_FIELDS:
                if isinstance(value, bool):
                    raise TypeError(key)
                out[key] = int(value)
            elif key in _FLOAT_FIELDS:
                out[key] = float(value)
            elif key in _STR_FIELDS:
                if not isinstance(value, str):
                    raise TypeError(key)
                out[key] = value
            elif key == "page_size_options":
                out[key] = [int(v) for v in value]
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid value for '{key}' in {path}: {value!r}") from e
    return out


def _validate(cfg: GlobalConfig, path: Path) -> None:
    if cfg.items_per_page <= 0:
        raise ConfigError(f"items_per_page must be positive in {path}")
    if any(n <= 0 for n in cfg.page_size_options):
        raise ConfigError(f"page_size_options must be positive in {path}")
    if cfg.items_per_page not in cfg.page_size_options:
        cfg.page_size_options = sorted(set(cfg.page_size_options) | {cfg.items_per_page})
    if cfg.request_timeout_s <= 0:
        raise ConfigError(f"request_timeout_s must be positive in {path}")
    if not cfg.source_url:
        raise ConfigError(f"source_url must not be empty in {path}")
