"""
どこで: `mockbuilder` 入口（公開 API）。
何を: `Builder`・関数 API・件数レンジ・乱数プロバイダの差し替え口を再輸出。
なぜ: 利用者が単一名前空間から Shape 定義→派生→生成まで完結できるようにするため。

Usage:
    from faker import Faker
    from mockbuilder import Builder
    from mockbuilder.common.logging import setup_default_logging

    setup_default_logging()  # MOCKBUILDER_DEBUG=1 で生成内容を DEBUG 出力

    fake = Faker()
    users = Builder({"id": fake.pyint, "name": fake.name, "active": True})

    one = users.build()
    many = users.with_value("active", False).build({"min": 1, "max": 10})
"""

from .builder import Builder, resolve_shape, resolve_value
from .common.types import CountRange, LiteralValue, Shape, Thunk, literal
from .functions import create_builder, generate, generate_random
from .providers import (
    NumpyRandomInt,
    RandomInt,
    get_random_int,
    random_int,
    reset_random_int,
    set_random_int,
)

__all__ = [
    # メインAPI
    "Builder",
    "create_builder",
    "generate",
    "generate_random",
    # 型
    "Shape",
    "Thunk",
    "CountRange",
    "LiteralValue",
    "literal",
    # 件数プロバイダ
    "RandomInt",
    "NumpyRandomInt",
    "random_int",
    "get_random_int",
    "set_random_int",
    "reset_random_int",
    # 低レベル
    "resolve_value",
    "resolve_shape",
]

__version__ = "2026.10"
