"""Single config object: user passes it when creating the app; available via DI."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any


class Config:
    """
    Application config. User creates their own class or instance
    and passes to Application(config=...); then available via container.resolve(type(config))
    and container.resolve("config"), and via container.resolve(Config) when it subclasses Config.
    """

    @classmethod
    def load_from_env(cls, prefix: str = "REPOKIT_", **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Returns dict for MyConfig(**Config.load_from_env())."""
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result


def _bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings(Config):
    """Typed view of REPOKIT_* environment variables."""

    log_level: str = "INFO"
    debug: bool = False


def load_config_from_env(prefix: str = "REPOKIT_") -> Settings:
    """Build Settings from the environment; unknown prefixed variables are ignored."""
    raw = Config.load_from_env(prefix, log_level="INFO", debug=False)
    return Settings(
        log_level=str(raw["log_level"]).upper(),
        debug=_bool(raw["debug"]),
    )
