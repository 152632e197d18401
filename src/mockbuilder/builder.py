"""
どこで: `mockbuilder.builder`（Shape を解決するビルダー本体）。
何を: Shape（フィールド名 → リテラル or 生成関数）を保持し、1 件/N 件/ランダム件数の dict を生成する
      `Builder` と、派生ビルダーを返すチェーン演算子を提供する。
なぜ: テストデータのテンプレートを共有状態の書き換えなしに再利用・分岐させるため。

Usage:
    from mockbuilder import Builder

    base = Builder({"name": "Default", "age": 25, "is_admin": False})
    admin = base.with_value("is_admin", True)

    admin.build()                       # {"name": "Default", "age": 25, "is_admin": True}
    base.build(3)                       # 3 件の list
    base.build({"min": 0, "max": 5})    # 0..5 件（両端含む）の list

Design
------
- 不変: 演算子は常に新しい dict を持つ新しい `Builder` を返し、受け手の Shape は書き換えない。
- 解決: `LiteralValue` はそのまま、呼び出し可能なら引数なしで呼ぶ、それ以外はリテラル。
  関数そのものを値にしたい場合は `literal(fn)` で包む（`callable` 判定では区別できないため）。
- 件数: `build()` と `build(1)` は単体の dict、それ以外の件数・レンジ指定は list を返す。
- 例外方針: 件数の型/範囲の誤りは生成関数を呼ぶ前に `TypeError`/`ValueError`。
  生成関数が送出した例外は包まずにそのまま伝播する。
"""

from __future__ import annotations

import copy
import logging
from types import MappingProxyType
from typing import Any, Callable, Generic, Mapping, TypeVar, cast

from .common import settings
from .common.types import Count, CountRange, LiteralValue, Shape, _require_count
from .providers import RandomInt, get_random_int

logger = logging.getLogger(__name__)

T = TypeVar("T")


def resolve_value(value: Any) -> Any:
    """Shape の 1 値を解決する（リテラルはそのまま、生成関数は呼び出す）。"""
    if isinstance(value, LiteralValue):
        return value.unwrap()
    if callable(value):
        return value()
    return value


def resolve_shape(shape: Shape) -> dict[str, Any]:
    """Shape 全体を 1 件の dict に解決する（浅いコピー）。"""
    return {key: resolve_value(value) for key, value in shape.items()}


class Builder(Generic[T]):
    """Shape から dict を生成する不変ビルダー。

    Parameters
    ----------
    shape : Mapping[str, Any] | None
        フィールド名 → リテラル or 引数なし生成関数。防御的にコピーして保持する。
        省略時は空の Shape（後から `apply_default_values` 等で組み立てる）。
    random_int : RandomInt | None
        レンジ指定の件数を引くプロバイダ。省略時は build 時点の
        `mockbuilder.providers.get_random_int()` を使う。
    """

    def __init__(self, shape: Shape | None = None, *, random_int: RandomInt | None = None) -> None:
        if shape is None:
            shape = {}
        elif not isinstance(shape, Mapping):
            raise TypeError(f"shape must be a mapping, got {type(shape).__name__}")
        if random_int is not None and not callable(random_int):
            raise TypeError(f"random_int must be callable, got {type(random_int).__name__}")
        self._shape: dict[str, Any] = dict(shape)
        self._random_int = random_int

    # ---- 派生 -------------------------------------------------------------
    def _derive(self, shape: dict[str, Any]) -> "Builder[T]":
        # サブクラスの属性を保ったまま Shape だけ差し替える
        clone = copy.copy(self)
        clone._shape = shape
        return clone

    def with_value(self, prop: str, value: Any) -> "Builder[T]":
        """`prop` を `value` に固定した新しいビルダーを返す。

        `value` は常にリテラルとして扱う（呼び出し可能でも呼ばない）。
        """
        shape = dict(self._shape)
        shape[prop] = LiteralValue(value)
        return self._derive(shape)

    def set_conditional_value(
        self, prop: str, condition: bool, true_value: Any, false_value: Any
    ) -> "Builder[T]":
        """`condition` をこの呼び出し時点で評価し、どちらかの値で `with_value` する。"""
        return self.with_value(prop, true_value if condition else false_value)

    def apply_default_values(self, defaults: Shape) -> "Builder[T]":
        """既定値を Shape の下に敷いた新しいビルダーを返す。

        既存のキーは上書きしない。既定値側の生成関数は解決時まで呼ばれない。
        """
        if not isinstance(defaults, Mapping):
            raise TypeError(f"defaults must be a mapping, got {type(defaults).__name__}")
        shape = dict(defaults)
        shape.update(self._shape)
        return self._derive(shape)

    def map_value(self, prop: str, map_fn: Callable[[Any], Any]) -> "Builder[T]":
        """`prop` の解決値を `map_fn` に通す新しいビルダーを返す。

        元の束縛（リテラル or 生成関数）はインスタンスごとに解決してから渡す。
        複数回呼ぶと呼び出し順に合成される。
        """
        if prop not in self._shape:
            raise KeyError(f"'{prop}' is not bound in the shape")
        if not callable(map_fn):
            raise TypeError(f"map_fn must be callable, got {type(map_fn).__name__}")
        previous = self._shape[prop]

        def mapped() -> Any:
            return map_fn(resolve_value(previous))

        shape = dict(self._shape)
        shape[prop] = mapped
        return self._derive(shape)

    # ---- 解決 -------------------------------------------------------------
    def build(self, count: Count = None) -> T | list[T]:
        """Shape を解決する。

        - `None` / `1`: 単体の dict
        - `int` N（0 以上）: N 件の list（0 なら空 list）
        - `CountRange` / `{"min": m, "max": n}`: `[m, n]` から件数を引いた list
        """
        if count is None:
            return self._build_one()
        if isinstance(count, (CountRange, Mapping)):
            return self._build_many(self._draw_count(CountRange.from_value(count)))
        n = self._check_count(count)
        if n == 1:
            return self._build_one()
        return self._build_many(n)

    def generate(self, count: Count = None) -> T | list[T]:
        """`build` の別名。"""
        return self.build(count)

    def _build_one(self) -> T:
        instance = resolve_shape(self._shape)
        if settings.get().DEBUG:
            logger.debug("resolved instance: %r", instance)
        return cast(T, instance)

    def _build_many(self, n: int) -> list[T]:
        logger.debug("building %d instance(s) from %d field(s)", n, len(self._shape))
        return [self._build_one() for _ in range(n)]

    @staticmethod
    def _check_count(n: object) -> int:
        n = _require_count("count", n)
        max_count = settings.get().MAX_COUNT
        if max_count is not None and n > max_count:
            raise ValueError(f"count {n} exceeds MOCKBUILDER_MAX_COUNT={max_count}")
        return n

    def _draw_count(self, rng: CountRange) -> int:
        self._check_count(rng.max)
        provider = self._random_int if self._random_int is not None else get_random_int()
        n = provider(rng.min, rng.max)
        if n not in rng:
            raise ValueError(f"random_int provider returned {n!r} outside [{rng.min}, {rng.max}]")
        logger.debug("drew count %d from [%d, %d]", n, rng.min, rng.max)
        return int(n)

    # ---- 参照 -------------------------------------------------------------
    @property
    def shape(self) -> Mapping[str, Any]:
        """現在の Shape の読み取り専用ビュー。"""
        return MappingProxyType(self._shape)

    # フィールド数や列挙は `shape` ビューで行う（空の Builder も真値のまま）
    def __contains__(self, prop: object) -> bool:
        return prop in self._shape

    def __repr__(self) -> str:  # 開発時の可読性向上
        fields = ", ".join(self._shape)
        return f"{type(self).__name__}(fields=[{fields}])"

    __str__ = __repr__


__all__ = ["Builder", "resolve_value", "resolve_shape"]
