from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class AppConfig:
    """Launch settings for the builder UI, read from SCHEMA_BUILDER_* variables."""
    host: str = "127.0.0.1"
    port: int = 7860
    share: bool = False
    log_level: str = "INFO"
    preview_indent: int = 2

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'AppConfig':
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            host=env.get("SCHEMA_BUILDER_HOST", defaults.host),
            port=_int_setting(env, "SCHEMA_BUILDER_PORT", defaults.port),
            share=env.get("SCHEMA_BUILDER_SHARE", "").strip().lower() in _TRUE_VALUES,
            log_level=env.get("SCHEMA_BUILDER_LOG_LEVEL", defaults.log_level).strip().upper(),
            preview_indent=_int_setting(env, "SCHEMA_BUILDER_PREVIEW_INDENT", defaults.preview_indent),
        )


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default
    if value < 0:
        logger.warning(f"Ignoring {name}={raw!r}: must not be negative, using {default}")
        return default
    return value


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
