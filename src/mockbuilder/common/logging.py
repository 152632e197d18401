"""
どこで: `mockbuilder.common.logging`
何を: `MOCKBUILDER_DEBUG` に連動したロギング初期化ヘルパ。
なぜ: ライブラリは import 時にロギングを設定しないため、テストや REPL から 1 行で有効化できるようにする。
"""

from __future__ import annotations

import logging

from . import settings

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_PACKAGE_LOGGER = "mockbuilder"


def _to_level(level: int | str | None) -> int:
    if level is None:
        return logging.DEBUG if settings.get().DEBUG else logging.INFO
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """ロギングを最小構成で有効化する。

    - ルートロガーにハンドラが無ければ `basicConfig` を 1 度だけ適用
      （`level` 省略時は `MOCKBUILDER_DEBUG` に従って DEBUG / INFO）
    - `MOCKBUILDER_DEBUG` が有効なら、アプリ側の設定有無に関係なく
      `mockbuilder` ロガーを DEBUG にする
    """
    if not logging.getLogger().handlers:
        logging.basicConfig(level=_to_level(level), format=_FORMAT)
    if settings.get().DEBUG:
        logging.getLogger(_PACKAGE_LOGGER).setLevel(logging.DEBUG)


__all__ = ["setup_default_logging"]
