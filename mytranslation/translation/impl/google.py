"""
Google Translate プロバイダー実装

deep-translator ライブラリを使用した Google Translate API のラッパー。
MyTranslationService に注入される実際のネットワーク越しのプロバイダー。
"""

from __future__ import annotations

import logging
from typing import Optional

from deep_translator import GoogleTranslator as DeepGoogleTranslator
from deep_translator.exceptions import (
    RequestError,
    TooManyRequests,
    TranslationNotFound,
)

from ..base import TranslateOption, TranslationProvider
from ..exceptions import TranslationError, TranslationNetworkError
from ..lang_codes import normalize_for_google
from ..result import Translation
from ..retry import RetryPolicy, with_retry

logger = logging.getLogger(__name__)


class GoogleTranslateProvider(TranslationProvider):
    """
    Google Translate (via deep-translator)

    無料の Google Translate API を使用した翻訳プロバイダー。
    ネットワークエラーは RetryPolicy に従ってリトライする。

    Examples:
        >>> provider = GoogleTranslateProvider(retry_policy=RetryPolicy(max_attempts=5))
        >>> result = provider.translate("Hello", TranslateOption.target_language("ru"))
        >>> print(result.get_translated_text())
        "Привет"
    """

    def __init__(
        self,
        source_lang: str = "auto",
        retry_policy: Optional[RetryPolicy] = None,
    ):
        """
        GoogleTranslateProvider を初期化

        Args:
            source_lang: ソース言語コード（"auto" で自動検出）
            retry_policy: ネットワークエラー時のリトライポリシー
        """
        self._source_lang = source_lang
        self._retry_policy = retry_policy or RetryPolicy()
        self._request = with_retry(self._retry_policy)(self._request_once)

    @property
    def source_lang(self) -> str:
        return self._source_lang

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._retry_policy

    def translate(self, text: str, option: TranslateOption) -> Translation:
        """
        テキストを翻訳

        Raises:
            ValueError: ターゲット言語以外のオプション、または解釈できない言語コード
            TranslationNetworkError: API リクエスト失敗、レート制限（リトライ後）
            TranslationError: その他の翻訳エラー
        """
        if option.name != TranslateOption.TARGET_LANGUAGE:
            raise ValueError(f"Unsupported translate option: {option.name}")
        target_lang = option.value

        # 空文字列は API を呼ばない
        if not text or not text.strip():
            return Translation(
                translated_text="",
                original_text=text,
                target_lang=target_lang,
                source_lang=self._source_lang,
            )

        source = normalize_for_google(self._source_lang)
        target = normalize_for_google(target_lang)
        translated = self._request(text, source, target)
        return Translation(
            translated_text=translated,
            original_text=text,
            target_lang=target_lang,
            source_lang=self._source_lang,
        )

    def _request_once(self, text: str, source: str, target: str) -> str:
        logger.debug(
            "Requesting Google translation (%s -> %s, %d chars)",
            source,
            target,
            len(text),
        )
        try:
            result: Optional[str] = DeepGoogleTranslator(
                source=source, target=target
            ).translate(text)
        except TooManyRequests as e:
            raise TranslationNetworkError(f"Rate limited: {e}") from e
        except RequestError as e:
            raise TranslationNetworkError(f"API request failed: {e}") from e
        except TranslationNotFound as e:
            raise TranslationError(f"Translation not found: {e}") from e
        except Exception as e:
            raise TranslationError(f"Unexpected error: {e}") from e

        if result is None:
            raise TranslationError("Translation not found: empty response")
        return result

    def get_provider_name(self) -> str:
        """プロバイダー名を取得"""
        return "google"
