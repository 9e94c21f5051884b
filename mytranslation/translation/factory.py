"""
翻訳プロバイダーのファクトリー

ProviderFactory はメタデータからプロバイダーを生成し、
MyTranslationService に注入するためのヘルパーを提供する。
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

from .metadata import ProviderMetadata

if TYPE_CHECKING:
    from ..service import MyTranslationService
    from .base import TranslationProvider


class ProviderFactory:
    """翻訳プロバイダーを作成するファクトリークラス"""

    @classmethod
    def create_provider(
        cls,
        provider_type: str,
        **provider_options,
    ) -> TranslationProvider:
        """
        指定されたタイプのプロバイダーを作成

        Args:
            provider_type: プロバイダータイプ（利用可能: google）
            **provider_options: プロバイダー固有のパラメータ

        Raises:
            ValueError: 不明なプロバイダータイプが指定された場合

        Examples:
            >>> provider = ProviderFactory.create_provider("google", source_lang="en")
        """
        metadata = ProviderMetadata.get(provider_type)
        if metadata is None:
            available = ProviderMetadata.list_provider_ids()
            raise ValueError(
                f"Unknown provider type: {provider_type}. Available: {available}"
            )

        # default_params と options をマージ
        params = {**metadata.default_params, **provider_options}

        module = importlib.import_module(metadata.module, package="mytranslation.translation")
        provider_class = getattr(module, metadata.class_name)
        return provider_class(**params)

    @classmethod
    def create_service(
        cls,
        provider_type: str = "google",
        **provider_options,
    ) -> MyTranslationService:
        """プロバイダーを作成し MyTranslationService に注入して返す"""
        from ..service import MyTranslationService

        return MyTranslationService(cls.create_provider(provider_type, **provider_options))

    @classmethod
    def list_available_providers(cls) -> list[str]:
        return ProviderMetadata.list_provider_ids()
