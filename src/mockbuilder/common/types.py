"""
どこで: `mockbuilder.common` の型定義。
何を: Shape/Thunk のエイリアス、件数レンジ `CountRange`、明示リテラル `LiteralValue`。
なぜ: builder と関数 API の双方から参照する型を依存の少ない場所へ置くため。
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Union

Thunk = Callable[[], Any]
# 値は「リテラル」か「引数なしで呼べる生成関数」。呼び出し可能なら常に生成関数として扱う。
Shape = Mapping[str, Any]


class LiteralValue:
    """値をリテラルとして固定する薄いラッパ。

    Shape の値は `callable(value)` で生成関数かどうかを判定するため、
    関数そのものをフィールド値にしたい場合（コールバック等）は区別できない。
    `LiteralValue(fn)` で包むと解決時に呼び出されず `fn` がそのまま入る。
    """

    __slots__ = ("value",)

    def __init__(self, value: object) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LiteralValue) and self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LiteralValue({self.value!r})"

    def unwrap(self) -> object:
        return self.value


def literal(value: object) -> LiteralValue:
    """`LiteralValue(value)` の短縮形。"""
    return LiteralValue(value)


def _require_count(name: str, value: object) -> int:
    # bool は int のサブクラスだが件数としては受け付けない
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return int(value)


@dataclass(frozen=True)
class CountRange:
    """ランダム件数の閉区間 `[min, max]`。

    `min > max` は黙って入れ替えず `ValueError` にする。
    """

    min: int
    max: int

    def __post_init__(self) -> None:
        _require_count("min", self.min)
        _require_count("max", self.max)
        if self.min > self.max:
            raise ValueError(f"min must be <= max, got min={self.min} max={self.max}")

    def __contains__(self, value: object) -> bool:
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            return False
        return self.min <= value <= self.max

    @classmethod
    def from_value(cls, value: "CountRange | Mapping[str, int]") -> "CountRange":
        """`CountRange` または `{"min": m, "max": n}` を `CountRange` に揃える。"""
        if isinstance(value, CountRange):
            return value
        if not isinstance(value, Mapping):
            raise TypeError(f"count range must be CountRange or mapping, got {type(value).__name__}")
        missing = [k for k in ("min", "max") if k not in value]
        if missing:
            raise KeyError(f"count range is missing {missing}")
        return cls(value["min"], value["max"])


Count = Union[None, int, CountRange, Mapping[str, int]]


__all__ = [
    "Thunk",
    "Shape",
    "Count",
    "CountRange",
    "LiteralValue",
    "literal",
]
