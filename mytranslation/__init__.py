"""Canonical re-exports for the mytranslation public API surface.

`MyTranslationService` wraps an injected `TranslationProvider`; the Google
provider is created lazily through `ProviderFactory` so that importing this
package does not require network access.
"""

from .service import MyTranslationService
from .translation import (
    MyTranslationServiceError,
    ProviderFactory,
    TranslateOption,
    Translation,
    TranslationError,
    TranslationNetworkError,
    TranslationProvider,
    UnsupportedTargetLanguageError,
)

__all__ = [
    "MyTranslationService",
    "TranslationProvider",
    "TranslateOption",
    "Translation",
    "ProviderFactory",
    "TranslationError",
    "TranslationNetworkError",
    "UnsupportedTargetLanguageError",
    "MyTranslationServiceError",
]
