"""
どこで: `mockbuilder.common.settings`
何を: ライブラリの環境変数設定を dataclass のスナップショットとして保持する。
なぜ: `os.getenv` をビルダー本体へ散在させず、テストから `reload_from_env()` で差し替えるため。

| 変数                    | 意味                                              |
|-------------------------|---------------------------------------------------|
| `MOCKBUILDER_SEED`      | 既定の乱数プロバイダのシード（未設定で OS 乱数）    |
| `MOCKBUILDER_MAX_COUNT` | 1 回の build で許す最大件数（0/未設定で無制限）     |
| `MOCKBUILDER_DEBUG`     | 生成したインスタンスを DEBUG ログへ出す             |
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int


@dataclass
class _Settings:
    SEED: int | None = None
    MAX_COUNT: int | None = None
    DEBUG: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込する。

    - シードは numpy が負値を受け付けないため 0 に切り上げる。
    - `MAX_COUNT` の 0 は「上限なし」として `None` に正規化する。
    """
    _settings.SEED = env_int("MOCKBUILDER_SEED", None, min_value=0)
    _settings.MAX_COUNT = env_int("MOCKBUILDER_MAX_COUNT", None, min_value=0) or None
    _settings.DEBUG = env_bool("MOCKBUILDER_DEBUG", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
