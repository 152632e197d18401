"""
どこで: `mockbuilder.common` パッケージ。
何を: 型定義・環境変数設定・ロギング補助など、builder 本体から使う共通基盤。
なぜ: 公開 API（builder/functions）と設定系の依存の向きを一方向に保つため。
"""

from .types import CountRange, LiteralValue, Shape, Thunk, literal

__all__ = [
    "CountRange",
    "LiteralValue",
    "Shape",
    "Thunk",
    "literal",
]
