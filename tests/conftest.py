"""共通フィクスチャ。

- 環境変数設定と既定の乱数プロバイダをテストごとに初期化
- 呼び出しを記録する固定値プロバイダ
"""

from __future__ import annotations

from typing import Iterator

import pytest

from mockbuilder.common import settings
from mockbuilder.providers import reset_random_int

_ENV_KEYS = ("MOCKBUILDER_SEED", "MOCKBUILDER_MAX_COUNT", "MOCKBUILDER_DEBUG")


class StubRandomInt:
    """常に `value` を返し、受け取った `(low, high)` を記録する。"""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[tuple[int, int | None]] = []

    def __call__(self, low: int, high: int | None = None) -> int:
        self.calls.append((low, high))
        return self.value


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    settings.reload_from_env()
    reset_random_int()
    yield
    reset_random_int()
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    settings.reload_from_env()


@pytest.fixture()
def stub_random_int():
    return StubRandomInt


@pytest.fixture()
def user_shape() -> dict:
    return {"name": "Default", "age": 25, "is_admin": False}
