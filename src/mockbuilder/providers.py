"""
どこで: `mockbuilder.providers`（ランダム件数プロバイダ）。
何を: 閉区間の一様整数を返す `RandomInt` プロトコル、numpy 実装、プロセス既定の差し替え口。
なぜ: `build({"min", "max"})` の件数決定を注入可能にし、テストで決定的な値へ固定するため。

引数の規約
----------
- `random_int(low, high)` は `[low, high]`（両端を含む）。
- `random_int(n)` は `[0, n]`（両端を含む）。単一引数は「最大 n 件」を意味する。
- `low > high`（単一引数なら負の `n`）は `ValueError`。
"""

from __future__ import annotations

import logging
from typing import Protocol

import numpy as np

from .common import settings

logger = logging.getLogger(__name__)


class RandomInt(Protocol):
    def __call__(self, low: int, high: int | None = None) -> int: ...


def normalize_bounds(low: int, high: int | None = None) -> tuple[int, int]:
    """引数規約に従って `(low, high)` の閉区間へ正規化する。"""
    if high is None:
        low, high = 0, low
    for name, v in (("low", low), ("high", high)):
        if isinstance(v, bool) or not isinstance(v, (int, np.integer)):
            raise TypeError(f"{name} must be int, got {type(v).__name__}")
    low, high = int(low), int(high)
    if low > high:
        raise ValueError(f"empty range: low={low} > high={high}")
    return low, high


class NumpyRandomInt:
    """`numpy.random.Generator` による既定実装。

    Parameters
    ----------
    seed : int | None
        シード。`None` なら OS の乱数源で初期化する。
    rng : numpy.random.Generator | None
        既存のジェネレータを共有したい場合に渡す（`seed` より優先）。
    """

    def __init__(self, seed: int | None = None, *, rng: np.random.Generator | None = None) -> None:
        self._seed = seed
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    def __call__(self, low: int, high: int | None = None) -> int:
        lo, hi = normalize_bounds(low, high)
        return int(self._rng.integers(lo, hi, endpoint=True))

    def __repr__(self) -> str:
        return f"NumpyRandomInt(seed={self._seed!r})"


_provider: RandomInt | None = None


def get_random_int() -> RandomInt:
    """プロセス既定のプロバイダを返す（初回に `MOCKBUILDER_SEED` から生成）。"""
    global _provider
    if _provider is None:
        seed = settings.get().SEED
        _provider = NumpyRandomInt(seed)
        logger.debug("default random_int provider created: seed=%s", seed)
    return _provider


def set_random_int(provider: RandomInt) -> None:
    """プロセス既定のプロバイダを差し替える。"""
    global _provider
    if not callable(provider):
        raise TypeError(f"provider must be callable, got {type(provider).__name__}")
    _provider = provider


def reset_random_int() -> None:
    """既定プロバイダを破棄する（次回の `get_random_int()` で設定から作り直す）。"""
    global _provider
    _provider = None


def random_int(low: int, high: int | None = None) -> int:
    """既定プロバイダで一様整数を 1 つ引く。"""
    lo, hi = normalize_bounds(low, high)
    return get_random_int()(lo, hi)


__all__ = [
    "RandomInt",
    "NumpyRandomInt",
    "normalize_bounds",
    "get_random_int",
    "set_random_int",
    "reset_random_int",
    "random_int",
]
