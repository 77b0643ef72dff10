"""Runtime settings read from the environment.

Env vars:
  SIPCALC_HOST=127.0.0.1        -> interface the API binds to
  SIPCALC_PORT=8000             -> API port
  SIPCALC_UI_PORT=8050          -> Dash UI port
  SIPCALC_DEBUG=0               -> Flask debug mode (1/true/yes/on)
  SIPCALC_LOG_LEVEL=INFO        -> root log level for the app loggers
  SIPCALC_CORS_ORIGIN=*         -> value of Access-Control-Allow-Origin
"""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Mapping

TRUTHY = {"1", "true", "yes", "on"}
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Settings:
    host: str = "127.0.0.1"
    port: int = 8000
    ui_port: int = 8050
    debug: bool = False
    log_level: str = "INFO"
    cors_origin: str = "*"


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    try:
        return int(env.get(key, default))
    except (TypeError, ValueError):
        return default


def _env_log_level(env: Mapping[str, str], key: str, default: str) -> str:
    level = str(env.get(key, default) or default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if env is None else env
    return Settings(
        host=str(env.get("SIPCALC_HOST", "127.0.0.1")).strip() or "127.0.0.1",
        port=_env_int(env, "SIPCALC_PORT", 8000),
        ui_port=_env_int(env, "SIPCALC_UI_PORT", 8050),
        debug=str(env.get("SIPCALC_DEBUG", "")).lower() in TRUTHY,
        log_level=_env_log_level(env, "SIPCALC_LOG_LEVEL", "INFO"),
        cors_origin=str(env.get("SIPCALC_CORS_ORIGIN", "*")).strip() or "*",
    )


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stdout handler to the package logger."""
    logger = logging.getLogger("sipcalc")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
