from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict

_SUPPORTED_KINDS = {"str", "bytes", "list", "tuple", "ndarray"}
_SUPPORTED_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}
_DEFAULT_KIND = "str"
_DEFAULT_LOG_LEVEL = "INFO"


def _bool_from_env(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _normalise_kind(value: str | None) -> str:
    if value is None or value.strip() == "":
        return _DEFAULT_KIND
    kind = value.strip().lower()
    if kind not in _SUPPORTED_KINDS:
        raise ValueError(f"Unsupported fragment kind '{kind}'. Expected one of {_SUPPORTED_KINDS}.")
    return kind


def _normalise_log_level(value: str | None) -> str:
    if value is None or value.strip() == "":
        return _DEFAULT_LOG_LEVEL
    level = value.strip().upper()
    if level not in _SUPPORTED_LOG_LEVELS:
        raise ValueError(f"Unsupported log level '{value}'. Expected one of {_SUPPORTED_LOG_LEVELS}.")
    return level


@dataclass(frozen=True)
class RuntimeConfig:
    log_level: str
    enable_diagnostics: bool
    default_kind: str

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        log_level = _normalise_log_level(os.getenv("ROPEX_LOG_LEVEL"))
        enable_diagnostics = _bool_from_env(
            os.getenv("ROPEX_ENABLE_DIAGNOSTICS"), default=True
        )
        default_kind = _normalise_kind(os.getenv("ROPEX_DEFAULT_KIND"))
        return cls(
            log_level=log_level,
            enable_diagnostics=enable_diagnostics,
            default_kind=default_kind,
        )


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("ropex")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    config = RuntimeConfig.from_env()
    _configure_logging(config.log_level)
    return config


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()


def describe_runtime() -> Dict[str, Any]:
    """Return a serialisable view of the active runtime configuration."""

    config = runtime_config()
    return {
        "log_level": config.log_level,
        "enable_diagnostics": config.enable_diagnostics,
        "default_kind": config.default_kind,
    }


__all__ = [
    "RuntimeConfig",
    "describe_runtime",
    "reset_runtime_config_cache",
    "runtime_config",
]
