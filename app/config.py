from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional
import structlog

log = structlog.get_logger()

CAPACITY_ENV = "RING_BUFFER_SIZE"
PORT_ENV = "PORT"
HOST_ENV = "HOST"
DEBUG_ENV = "RING_BUFFER_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    """Startup configuration is unusable; the process must not start."""


@dataclass(frozen=True)
class ServerConfig:
    capacity: int = 1024
    port: int = 8080
    host: str = "0.0.0.0"   # all interfaces
    debug: bool = False

    def __post_init__(self):
        if self.capacity <= 0:
            raise ConfigError(f"{CAPACITY_ENV} must be a positive integer, got {self.capacity}")
        if not 0 < self.port < 65536:
            raise ConfigError(f"{PORT_ENV} must be in 1..65535, got {self.port}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """Read every setting once; unset or empty variables fall back to the defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()

        capacity = _int_setting(env, CAPACITY_ENV, defaults.capacity)
        port = _int_setting(env, PORT_ENV, defaults.port)

        host = env.get(HOST_ENV) or defaults.host
        debug = is_truthy(env.get(DEBUG_ENV))

        return cls(capacity=capacity, port=port, host=host, debug=debug)


def is_truthy(raw: Optional[str]) -> bool:
    return (raw or "").strip().lower() in _TRUTHY


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if not raw:
        log.info("config.default", var=name, value=default)
        return default
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ConfigError(f"failed to convert {name} to int: {raw!r}") from e
