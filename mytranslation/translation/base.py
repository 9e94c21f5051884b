"""
翻訳プロバイダーの抽象基底クラス

MyTranslationService に注入される翻訳プロバイダーはこの基底クラスを継承する。
テストではモックに差し替えられる。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .result import Translation


@dataclass(frozen=True)
class TranslateOption:
    """
    翻訳リクエストのオプション

    Examples:
        >>> TranslateOption.target_language("ru")
        TranslateOption(name='targetLanguage', value='ru')
    """

    name: str
    value: str

    TARGET_LANGUAGE = "targetLanguage"

    @classmethod
    def target_language(cls, code: str) -> TranslateOption:
        """ターゲット言語を指定するオプションを作成"""
        return cls(name=cls.TARGET_LANGUAGE, value=code)


class TranslationProvider(ABC):
    """翻訳プロバイダーの抽象基底クラス"""

    @abstractmethod
    def translate(self, text: str, option: TranslateOption) -> Translation:
        """
        テキストを翻訳

        Args:
            text: 翻訳対象テキスト
            option: ターゲット言語を指定するオプション

        Returns:
            Translation

        Raises:
            TranslationError: 翻訳に失敗した場合
        """
        ...

    @abstractmethod
    def get_provider_name(self) -> str:
        """
        プロバイダー名を取得

        Returns:
            プロバイダーの識別子（例: "google"）
        """
        ...
