"""
RetryPolicy / with_retry のテスト
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from mytranslation.config import get_default_config
from mytranslation.translation.exceptions import (
    TranslationError,
    TranslationNetworkError,
)
from mytranslation.translation.retry import RetryPolicy, with_retry

FAST = RetryPolicy(max_attempts=3, base_delay=0.0)


class TestRetryPolicy:
    """RetryPolicy のテスト"""

    def test_defaults(self):
        policy = RetryPolicy()
        assert policy.max_attempts == 3
        assert policy.base_delay == 1.0
        assert policy.max_delay == 30.0

    def test_delay_doubles_and_is_capped(self):
        policy = RetryPolicy(max_attempts=10, base_delay=1.0, max_delay=5.0)
        assert [policy.delay_for(i) for i in range(5)] == [1.0, 2.0, 4.0, 5.0, 5.0]

    def test_from_config(self):
        translation_config = get_default_config()["translation"]
        translation_config["max_retries"] = 5
        translation_config["base_delay"] = 0.5

        policy = RetryPolicy.from_config(translation_config)
        assert policy == RetryPolicy(max_attempts=5, base_delay=0.5, max_delay=30.0)

    def test_from_empty_config_uses_defaults(self):
        assert RetryPolicy.from_config({}) == RetryPolicy()

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_attempts": 0}, {"base_delay": -1.0}, {"max_delay": -0.1}],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            RetryPolicy(**kwargs)


class TestWithRetry:
    """with_retry デコレータのテスト"""

    def test_success_first_attempt(self):
        """初回成功時はリトライしない"""
        mock_func = MagicMock(return_value="success")
        assert with_retry(FAST)(mock_func)() == "success"
        assert mock_func.call_count == 1

    def test_success_after_failure(self):
        mock_func = MagicMock(
            side_effect=[
                TranslationNetworkError("fail1"),
                TranslationNetworkError("fail2"),
                "success",
            ]
        )
        assert with_retry(FAST)(mock_func)() == "success"
        assert mock_func.call_count == 3

    def test_attempts_exhausted_reraises_last_error(self):
        mock_func = MagicMock(
            side_effect=[TranslationNetworkError("first"), TranslationNetworkError("last")]
        )
        decorated = with_retry(RetryPolicy(max_attempts=2, base_delay=0.0))(mock_func)
        with pytest.raises(TranslationNetworkError, match="last"):
            decorated()
        assert mock_func.call_count == 2

    def test_single_attempt_never_sleeps(self):
        mock_func = MagicMock(side_effect=TranslationNetworkError("fail"))
        decorated = with_retry(RetryPolicy(max_attempts=1))(mock_func)
        with patch("mytranslation.translation.retry.time.sleep") as mock_sleep:
            with pytest.raises(TranslationNetworkError):
                decorated()
        mock_sleep.assert_not_called()

    def test_non_network_error_not_retried(self):
        """TranslationNetworkError 以外はリトライしない"""
        mock_func = MagicMock(side_effect=TranslationError("non-network error"))
        with pytest.raises(TranslationError, match="non-network error"):
            with_retry(FAST)(mock_func)()
        assert mock_func.call_count == 1

    def test_custom_retry_on(self):
        mock_func = MagicMock(side_effect=[TimeoutError(), "ok"])
        decorated = with_retry(FAST, retry_on=(TimeoutError,))(mock_func)
        assert decorated() == "ok"
        assert mock_func.call_count == 2

    def test_sleeps_follow_policy(self):
        mock_func = MagicMock(side_effect=TranslationNetworkError("fail"))
        policy = RetryPolicy(max_attempts=4, base_delay=0.5, max_delay=1.5)
        with patch("mytranslation.translation.retry.time.sleep") as mock_sleep:
            with pytest.raises(TranslationNetworkError):
                with_retry(policy)(mock_func)()
        assert [c.args[0] for c in mock_sleep.call_args_list] == [0.5, 1.0, 1.5]

    def test_retries_are_logged(self, caplog):
        mock_func = MagicMock(side_effect=[TranslationNetworkError("flaky"), "ok"])
        with caplog.at_level("WARNING", logger="mytranslation.translation.retry"):
            with_retry(FAST)(mock_func)()
        assert "Attempt 1/3 failed" in caplog.text

    def test_preserves_function_metadata(self):
        """functools.wraps でメタデータが保持される"""

        @with_retry()
        def my_function():
            """My docstring"""
            pass

        assert my_function.__name__ == "my_function"
        assert my_function.__doc__ == "My docstring"

    def test_arguments_passed_through(self):
        mock_func = MagicMock(return_value="result")
        with_retry(FAST)(mock_func)("arg1", kwarg1="value1")
        mock_func.assert_called_once_with("arg1", kwarg1="value1")
