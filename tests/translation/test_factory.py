"""
ProviderFactory / ProviderMetadata のテスト
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from mytranslation.service import MyTranslationService
from mytranslation.translation.factory import ProviderFactory
from mytranslation.translation.impl.google import GoogleTranslateProvider
from mytranslation.translation.metadata import ProviderInfo, ProviderMetadata
from mytranslation.translation.retry import RetryPolicy


class TestProviderMetadata:
    """ProviderMetadata のテスト"""

    def test_google_registered(self):
        info = ProviderMetadata.get("google")
        assert isinstance(info, ProviderInfo)
        assert info.display_name == "Google Translate"
        assert info.module == ".impl.google"
        assert info.class_name == "GoogleTranslateProvider"

    def test_unknown_returns_none(self):
        assert ProviderMetadata.get("unknown") is None

    def test_get_all_returns_copy(self):
        all_providers = ProviderMetadata.get_all()
        all_providers.pop("google")
        assert ProviderMetadata.get("google") is not None


class TestProviderFactory:
    """ProviderFactory のテスト"""

    def test_create_google_provider(self):
        provider = ProviderFactory.create_provider("google")
        assert isinstance(provider, GoogleTranslateProvider)
        assert provider.get_provider_name() == "google"
        assert provider.source_lang == "auto"

    def test_options_override_defaults(self):
        provider = ProviderFactory.create_provider("google", source_lang="en")
        assert provider.source_lang == "en"

    def test_retry_policy_passed_through(self):
        policy = RetryPolicy(max_attempts=5, base_delay=0.1)
        provider = ProviderFactory.create_provider("google", retry_policy=policy)
        assert provider.retry_policy is policy

    def test_create_unknown_provider_raises(self):
        with pytest.raises(ValueError, match="Unknown provider type"):
            ProviderFactory.create_provider("unknown_engine")

    def test_list_available_providers(self):
        assert ProviderFactory.list_available_providers() == ["google"]

    def test_create_service(self):
        with patch(
            "mytranslation.translation.impl.google.DeepGoogleTranslator"
        ) as mock_gt:
            mock_gt.return_value.translate.return_value = "Некое предложение"

            service = ProviderFactory.create_service()
            assert isinstance(service, MyTranslationService)
            assert service.translate_with_google("Some sentence", "ru") == "Некое предложение"
