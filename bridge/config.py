"""Runtime settings read from the environment (a .env file is loaded by the server)."""

import os
from dataclasses import dataclass

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_INBOX_WARN_SIZE = 1000


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, default))
    except (ValueError, TypeError):
        return default


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    # 0 disables the backlog warning
    inbox_warn_size: int = DEFAULT_INBOX_WARN_SIZE

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host=(os.environ.get("BRIDGE_HOST") or "").strip() or DEFAULT_HOST,
            port=_int_env("BRIDGE_PORT", DEFAULT_PORT),
            log_level=(os.environ.get("LOG_LEVEL") or "").strip().upper() or DEFAULT_LOG_LEVEL,
            inbox_warn_size=max(0, _int_env("INBOX_WARN_SIZE", DEFAULT_INBOX_WARN_SIZE)),
        )
