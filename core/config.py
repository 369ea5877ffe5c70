"""
Configuration Module
Runtime settings read from the environment.
"""

from dataclasses import dataclass
from typing import Mapping, Optional
import os

from .errors import ConfigError


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class BuilderSettings:
    host: str = '127.0.0.1'
    port: int = 5000
    log_level: str = 'INFO'
    stream_chunk_size: int = 5
    stream_delay_ms: int = 50
    max_text_length: int = 1000

    @classmethod
    def load(cls, env: Optional[Mapping[str, str]] = None) -> 'BuilderSettings':
        env = os.environ if env is None else env
        settings = cls(
            host=env.get('EMAIL_BUILDER_HOST', cls.host),
            port=_int_env(env, 'PORT', cls.port),
            log_level=env.get('EMAIL_BUILDER_LOG_LEVEL', cls.log_level).upper(),
            stream_chunk_size=_int_env(env, 'EMAIL_BUILDER_STREAM_CHUNK_SIZE', cls.stream_chunk_size),
            stream_delay_ms=_int_env(env, 'EMAIL_BUILDER_STREAM_DELAY_MS', cls.stream_delay_ms),
            max_text_length=_int_env(env, 'EMAIL_BUILDER_MAX_TEXT_LENGTH', cls.max_text_length),
        )
        if settings.stream_chunk_size < 1:
            raise ConfigError('EMAIL_BUILDER_STREAM_CHUNK_SIZE must be at least 1')
        return settings
