"""Configuration helpers (YAML loading, environment overlay, logging setup)."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from binance_spot.exchange.session import DEFAULT_BASE_URL, TESTNET_BASE_URL, SessionConfig

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

ENV_OVERRIDES = {
    "BINANCE_API_KEY": "api_key",
    "BINANCE_API_SECRET": "api_secret",
    "BINANCE_BASE_URL": "base_url",
}


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Load YAML configuration from `path`, or config.yaml with a sample fallback."""
    if path is None:
        config_path = CONFIG_DIR / "config.yaml"
        if not config_path.exists():
            logging.getLogger(__name__).warning("config.yaml not found, falling back to sample configuration.")
            config_path = CONFIG_DIR / "config.sample.yaml"
    else:
        config_path = Path(path)
    with config_path.open("r", encoding="utf-8") as fh:
        loaded = yaml.safe_load(fh) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Configuration root must be a mapping: {config_path}")
    return loaded


def resolve_environment_variables(
    config: Mapping[str, Any],
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Return a copy of `config` with BINANCE_* environment variables merged into `exchange`.

    Non-empty environment values win over the file.
    """
    env = os.environ if environ is None else environ
    resolved = dict(config)
    exchange_cfg = dict(resolved.get("exchange") or {})
    for var, key in ENV_OVERRIDES.items():
        value = str(env.get(var) or "").strip()
        if value:
            exchange_cfg[key] = value
    resolved["exchange"] = exchange_cfg
    return resolved


def session_config_from(config: Mapping[str, Any]) -> SessionConfig:
    """Build a `SessionConfig` from the `exchange` section of a loaded config."""
    exchange_cfg = config.get("exchange", {}) or {}
    api_key = str(exchange_cfg.get("api_key") or "").strip() or None
    api_secret = str(exchange_cfg.get("api_secret") or "").strip() or None

    base_url = exchange_cfg.get("base_url")
    if not base_url:
        use_sandbox = bool(exchange_cfg.get("use_sandbox", False))
        base_url = TESTNET_BASE_URL if use_sandbox else DEFAULT_BASE_URL

    recv_window = exchange_cfg.get("recv_window")
    return SessionConfig(
        api_key=api_key,
        api_secret=api_secret,
        base_url=str(base_url),
        timeout_seconds=float(exchange_cfg.get("timeout_seconds", 10.0) or 10.0),
        recv_window=int(recv_window) if recv_window is not None else None,
    )


def setup_logging(config: Optional[Mapping[str, Any]] = None) -> None:
    """Configure root logging from the `logging` section (level, format)."""
    log_cfg = (config or {}).get("logging", {}) or {}
    level_name = str(log_cfg.get("level", "INFO") or "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    logging.basicConfig(level=level, format=str(log_cfg.get("format") or LOG_FORMAT))
