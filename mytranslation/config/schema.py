"""TypedDict definitions describing the mytranslation configuration."""

from __future__ import annotations

from typing import Literal, TypedDict

__all__ = [
    "TranslationConfig",
    "LoggingConfig",
    "CoreConfig",
]


class TranslationConfig(TypedDict, total=False):
    provider: str
    target_language: str
    source_language: str
    max_retries: int
    base_delay: float
    max_delay: float


class LoggingConfig(TypedDict, total=False):
    console_log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CoreConfig(TypedDict):
    translation: TranslationConfig
    logging: LoggingConfig
