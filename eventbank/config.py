"""
Environment configuration.

Environment Variables:
    EVENTBANK_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL - default: INFO
    EVENTBANK_LOG_FORMAT: json, text - default: json
    EVENTBANK_CLOCK: system, stepping - default: system
    EVENTBANK_ID_MODE: uuid, sequential - default: uuid
    EVENTBANK_ID_NAMESPACE: namespace for sequential ids - default: eventbank
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .core.errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")
CLOCKS = ("system", "stepping")
ID_MODES = ("uuid", "sequential")


def _choice(env: Mapping[str, str], key: str, default: str, allowed: Tuple[str, ...], upper: bool = False) -> str:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    val = raw.strip().upper() if upper else raw.strip().lower()
    if val not in allowed:
        raise ConfigError(f"{key}={raw!r} is not one of {', '.join(allowed)}")
    return val


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_format: str = "json"
    clock: str = "system"
    id_mode: str = "uuid"
    id_namespace: str = "eventbank"

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Read settings from the environment (os.environ by default).

        Raises:
            ConfigError: If a variable holds an unsupported value
        """
        env = os.environ if env is None else env
        return Settings(
            log_level=_choice(env, "EVENTBANK_LOG_LEVEL", "INFO", LOG_LEVELS, upper=True),
            log_format=_choice(env, "EVENTBANK_LOG_FORMAT", "json", LOG_FORMATS),
            clock=_choice(env, "EVENTBANK_CLOCK", "system", CLOCKS),
            id_mode=_choice(env, "EVENTBANK_ID_MODE", "uuid", ID_MODES),
            id_namespace=(env.get("EVENTBANK_ID_NAMESPACE") or "eventbank").strip() or "eventbank",
        )
