"""
リトライポリシー

ネットワーク越しの翻訳プロバイダー呼び出しを指数バックオフで再試行する。
試行回数と待機時間は設定の translation セクションから構築できる。
MyTranslationService 自体はリトライしない。
"""

from __future__ import annotations

import functools
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Tuple, Type, TypeVar

from .exceptions import TranslationNetworkError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)


@dataclass(frozen=True)
class RetryPolicy:
    """
    リトライの試行回数と待機時間

    Attributes:
        max_attempts: 初回を含む最大試行回数
        base_delay: 初回リトライまでの待機時間（秒）
        max_delay: 待機時間の上限（秒）
    """

    max_attempts: int = 3
    base_delay: float = 1.0
    max_delay: float = 30.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.base_delay < 0 or self.max_delay < 0:
            raise ValueError("retry delays must be >= 0")

    @classmethod
    def from_config(cls, translation_config: Mapping[str, Any]) -> RetryPolicy:
        """translation セクションの max_retries / base_delay / max_delay から構築"""
        defaults = cls()
        return cls(
            max_attempts=translation_config.get("max_retries", defaults.max_attempts),
            base_delay=translation_config.get("base_delay", defaults.base_delay),
            max_delay=translation_config.get("max_delay", defaults.max_delay),
        )

    def delay_for(self, retry_index: int) -> float:
        """retry_index 回目（0 始まり）のリトライ前の待機時間"""
        return min(self.base_delay * (2**retry_index), self.max_delay)


def with_retry(
    policy: Optional[RetryPolicy] = None,
    retry_on: Tuple[Type[BaseException], ...] = (TranslationNetworkError,),
) -> Callable[[F], F]:
    """
    RetryPolicy に従って関数呼び出しを再試行するデコレータ

    retry_on に含まれる例外のみ再試行し、試行回数を使い切ったら
    最後の例外をそのまま送出する。

    Examples:
        >>> @with_retry(RetryPolicy(max_attempts=5, base_delay=0.5))
        ... def fetch(text):
        ...     pass
    """
    policy = policy or RetryPolicy()

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            attempt = 0
            while True:
                attempt += 1
                try:
                    return func(*args, **kwargs)
                except retry_on as e:
                    if attempt >= policy.max_attempts:
                        logger.error(
                            "Giving up after %d attempt(s): %s", attempt, e
                        )
                        raise
                    delay = policy.delay_for(attempt - 1)
                    logger.warning(
                        "Attempt %d/%d failed, retrying in %.1fs: %s",
                        attempt,
                        policy.max_attempts,
                        delay,
                        e,
                    )
                    time.sleep(delay)

        return wrapper  # type: ignore[return-value]

    return decorator
