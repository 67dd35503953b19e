import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import ConfigError


def _env_float(name: str, default: Optional[float]) -> Optional[float]:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_list(name: str) -> List[str]:
    value = os.getenv(name) or ""
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class KDEConfig:
    base_url: str
    auth_cookie: str
    allowed_origins: List[str] = field(default_factory=list)
    # None disables the request timeout entirely
    default_timeout: Optional[float] = None
    http_log_path: Optional[str] = None

    @classmethod
    def from_env(cls, **overrides: Any) -> "KDEConfig":
        """Build a config from KDE_* variables; non-None overrides win."""
        values: Dict[str, Any] = {
            "base_url": os.getenv("KDE_BASE_URL"),
            "auth_cookie": os.getenv("KDE_AUTH_COOKIE"),
            "allowed_origins": _env_list("KDE_ALLOWED_ORIGINS"),
            "default_timeout": _env_float("KDE_TIMEOUT", None),
            "http_log_path": os.getenv("KDE_HTTP_LOG") or None,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        if not values["base_url"]:
            raise ConfigError("Missing KDE_BASE_URL")
        if not values["auth_cookie"]:
            raise ConfigError("Missing KDE_AUTH_COOKIE")
        return cls(**values)
