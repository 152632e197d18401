"""
どこで: `mockbuilder.common.env`
何を: `MOCKBUILDER_*` 環境変数を型付きで読み取る小さなパーサ群。
なぜ: 設定値の解釈（未設定/不正値/下限）を 1 か所に寄せ、settings から再利用するため。
"""

from __future__ import annotations

import os
from typing import Optional

_TRUE_WORDS = frozenset({"true", "t", "yes", "y", "on"})
_FALSE_WORDS = frozenset({"false", "f", "no", "n", "off"})


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数の環境変数を読む。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[int]
        未設定・空文字・整数として解釈できない場合に返す値。
    min_value : Optional[int]
        指定時、読み取った値が下回れば `min_value` に切り上げる。

    Returns
    -------
    Optional[int]
        解釈済みの値、または `default`。
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """真偽の環境変数を読む（数値 / true,false / yes,no / on,off）。"""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    s = raw.strip().lower()
    try:
        return int(s) != 0
    except ValueError:
        pass
    if s in _TRUE_WORDS:
        return True
    if s in _FALSE_WORDS:
        return False
    return bool(default)


__all__ = ["env_int", "env_bool"]
