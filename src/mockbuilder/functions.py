"""
どこで: `mockbuilder.functions`（単発呼び出し用の関数 API）。
何を: ビルダーを保持せずに 1 回だけ生成したい場合の薄いラッパ群。
なぜ: `Builder(shape).build(...)` を毎回書かずに済ませるため（再利用するなら `Builder` を使う）。
"""

from __future__ import annotations

from typing import Any

from .builder import Builder
from .common.types import Count, CountRange, Shape
from .providers import RandomInt


def create_builder(shape: Shape | None = None, *, random_int: RandomInt | None = None) -> Builder[Any]:
    """`Builder(shape)` を返す。"""
    return Builder(shape, random_int=random_int)


def generate(shape: Shape, count: Count = None, *, random_int: RandomInt | None = None) -> Any:
    """使い捨てビルダーで `build(count)` する。"""
    return Builder(shape, random_int=random_int).build(count)


def generate_random(
    shape: Shape,
    max_count: int,
    *,
    min_count: int = 0,
    random_int: RandomInt | None = None,
) -> list[Any]:
    """`[min_count, max_count]`（両端含む）からランダムな件数を生成して list で返す。"""
    return Builder(shape, random_int=random_int).build(CountRange(min_count, max_count))


__all__ = ["create_builder", "generate", "generate_random"]
