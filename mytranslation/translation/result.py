"""
翻訳結果のデータクラス

プロバイダーが返す翻訳結果を格納する。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Translation:
    """翻訳結果"""

    translated_text: str  # 翻訳テキスト
    original_text: str  # 原文
    target_lang: str  # ターゲット言語
    source_lang: Optional[str] = None  # ソース言語（自動検出の場合は None）

    def get_translated_text(self) -> str:
        """翻訳テキストを取得"""
        return self.translated_text
