"""
翻訳プロバイダーシステム

MyTranslationService に注入する翻訳プロバイダーの抽象と実装を提供する。

Usage:
    from mytranslation.translation import ProviderFactory, TranslateOption

    provider = ProviderFactory.create_provider("google")
    result = provider.translate("Hello", TranslateOption.target_language("ru"))
    print(result.get_translated_text())
"""

from __future__ import annotations

from .base import TranslateOption, TranslationProvider
from .exceptions import (
    MyTranslationServiceError,
    TranslationError,
    TranslationNetworkError,
    UnsupportedTargetLanguageError,
)
from .factory import ProviderFactory
from .lang_codes import get_language_name, normalize_for_google, to_iso639_1
from .metadata import ProviderInfo, ProviderMetadata
from .result import Translation
from .retry import RetryPolicy, with_retry

__all__ = [
    # Core classes
    "TranslationProvider",
    "TranslateOption",
    "Translation",
    "ProviderFactory",
    "ProviderMetadata",
    "ProviderInfo",
    # Exceptions
    "TranslationError",
    "TranslationNetworkError",
    "UnsupportedTargetLanguageError",
    "MyTranslationServiceError",
    # Language code utilities
    "to_iso639_1",
    "normalize_for_google",
    "get_language_name",
    # Retry
    "RetryPolicy",
    "with_retry",
]
