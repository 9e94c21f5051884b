"""
翻訳プロバイダーのメタデータ管理

プロバイダーの登録情報とファクトリー生成用メタデータを管理する。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ProviderInfo:
    """翻訳プロバイダーのメタデータ"""

    provider_id: str
    display_name: str
    description: str
    module: str  # e.g., ".impl.google"
    class_name: str  # e.g., "GoogleTranslateProvider"
    default_params: Dict[str, Any] = field(default_factory=dict)


class ProviderMetadata:
    """翻訳プロバイダーのメタデータ管理"""

    _PROVIDERS: Dict[str, ProviderInfo] = {
        "google": ProviderInfo(
            provider_id="google",
            display_name="Google Translate",
            description="Google Translate API (via deep-translator)",
            module=".impl.google",
            class_name="GoogleTranslateProvider",
            default_params={"source_lang": "auto"},
        ),
    }

    @classmethod
    def get(cls, provider_id: str) -> Optional[ProviderInfo]:
        """
        プロバイダーのメタデータを取得

        Returns:
            ProviderInfo、見つからない場合は None
        """
        return cls._PROVIDERS.get(provider_id)

    @classmethod
    def get_all(cls) -> Dict[str, ProviderInfo]:
        """全てのプロバイダーメタデータを取得"""
        return cls._PROVIDERS.copy()

    @classmethod
    def list_provider_ids(cls) -> List[str]:
        return list(cls._PROVIDERS.keys())
