"""
翻訳エラーの例外クラス階層

翻訳処理で発生する各種エラーを分類するための例外クラスを定義。
"""

from __future__ import annotations


class TranslationError(Exception):
    """翻訳エラーの基底クラス"""

    pass


class TranslationNetworkError(TranslationError):
    """ネットワーク関連エラー（API 失敗、タイムアウト、レート制限）"""

    pass


class UnsupportedTargetLanguageError(TranslationError, ValueError):
    """未サポートのターゲット言語（不正な引数）"""

    def __init__(self, target: str, supported: str):
        self.target = target
        self.supported = supported
        super().__init__(
            f"Target language {target!r} not supported (supported: {supported!r})"
        )


class MyTranslationServiceError(TranslationError):
    """翻訳プロバイダーの失敗をラップするサービスエラー"""

    def __init__(self, message: str, cause: BaseException | None = None):
        self.cause = cause
        super().__init__(message)
