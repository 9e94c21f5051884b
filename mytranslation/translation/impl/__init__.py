"""翻訳プロバイダー実装"""

from .google import GoogleTranslateProvider

__all__ = ["GoogleTranslateProvider"]
