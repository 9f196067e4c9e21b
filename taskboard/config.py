"""
Server Configuration
=====================
Defaults, overridden by TASKBOARD_* environment variables, overridden
again by CLI flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

ENV_PREFIX = "TASKBOARD_"

# Level names understood by both the logging module and uvicorn.
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


@dataclass
class ServerConfig:
    """Settings for the HTTP server."""

    host: str = "0.0.0.0"
    port: int = 3000
    api_prefix: str = "/api"         # Where the task router is mounted
    log_level: str = "INFO"
    banner: str = "Taskboard Backend API"

    def __post_init__(self):
        self.port = _parse_port(self.port)
        self.api_prefix = _normalize_prefix(self.api_prefix)
        self.log_level = _normalize_log_level(self.log_level)

    @property
    def base_url(self) -> str:
        host = "localhost" if self.host in ("0.0.0.0", "") else self.host
        return f"http://{host}:{self.port}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ServerConfig:
        """Build a config from TASKBOARD_HOST/PORT/API_PREFIX/LOG_LEVEL."""
        env = os.environ if environ is None else environ
        kwargs = {}
        for field_name in ("host", "port", "api_prefix", "log_level"):
            value = env.get(ENV_PREFIX + field_name.upper())
            if value is not None:
                kwargs[field_name] = value
        return cls(**kwargs)

    def with_overrides(self, **overrides) -> ServerConfig:
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _parse_port(value) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid port: {value!r}")
    if not 0 < port < 65536:
        raise ValueError(f"Port out of range: {port}")
    return port


def _normalize_log_level(level: str) -> str:
    name = str(level).strip().upper()
    name = _LEVEL_ALIASES.get(name, name)
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level!r} (choose from {', '.join(LOG_LEVELS)})")
    return name


def _normalize_prefix(prefix: str) -> str:
    if prefix in ("", "/"):
        return ""
    if not prefix.startswith("/"):
        raise ValueError(f"API prefix must start with '/': {prefix!r}")
    return prefix.rstrip("/")
