"""
MyTranslationService

注入された翻訳プロバイダーの薄いラッパー。
ターゲット言語を検証し、プロバイダーを一度だけ呼び出し、
結果を文字列に変換し、失敗を MyTranslationServiceError に変換する。
"""

from __future__ import annotations

import logging

from .translation.base import TranslateOption, TranslationProvider
from .translation.exceptions import (
    MyTranslationServiceError,
    UnsupportedTargetLanguageError,
)

logger = logging.getLogger(__name__)


class MyTranslationService:
    """
    Google Translate を使った翻訳サービス

    サポートするターゲット言語は "ru" のみ。

    Examples:
        >>> service = MyTranslationService(GoogleTranslateProvider())
        >>> service.translate_with_google("Some sentence", "ru")
        "Некое предложение"
    """

    SUPPORTED_TARGET_LANGUAGE = "ru"

    def __init__(self, provider: TranslationProvider):
        self._provider = provider

    def translate_with_google(self, sentence: str, target_language: str) -> str:
        """
        文をターゲット言語に翻訳

        Args:
            sentence: 翻訳対象の文
            target_language: ターゲット言語コード（"ru" のみ）

        Returns:
            翻訳テキスト

        Raises:
            UnsupportedTargetLanguageError: target_language が "ru" 以外の場合
                （ValueError のサブクラス。プロバイダーは呼ばれない）
            MyTranslationServiceError: プロバイダーが例外を送出した場合
        """
        if target_language != self.SUPPORTED_TARGET_LANGUAGE:
            raise UnsupportedTargetLanguageError(
                target_language, self.SUPPORTED_TARGET_LANGUAGE
            )

        logger.debug("Delegating translation to provider (target=%s)", target_language)
        try:
            translation = self._provider.translate(
                sentence, TranslateOption.target_language(target_language)
            )
        except Exception as e:
            logger.warning("Translation provider failed: %s", e)
            raise MyTranslationServiceError(
                f"Translation to {target_language!r} failed: {e}", cause=e
            ) from e

        return translation.get_translated_text()
