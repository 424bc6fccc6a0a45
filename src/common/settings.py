"""
どこで: `common.settings`
何を: `PLAY_*` 環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を避け、既定値/型の一貫性とテスト容易性を保つため。

YAML 設定（`util.utils.load_config`）より環境変数を優先する。未設定の項目は
`None` のまま残し、呼び出し側が YAML → 既定値の順に解決する。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_int, env_str

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_BACKEND = "osc"


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = DEFAULT_LOG_LEVEL

    # Backend 選択（osc / log）
    BACKEND: str = DEFAULT_BACKEND

    # scsynth 接続先（None は未指定 = YAML/既定値に委ねる）
    SC_HOST: str | None = None
    SC_PORT: int | None = None
    SC_ADD_ACTION: int | None = None
    SC_TARGET: int | None = None


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - ポート番号は 1–65535 に丸める。
    - BACKEND は小文字化する（妥当性は `play.backends` が検査）。
    """
    _settings.LOG_LEVEL = (env_str("PLAY_LOG_LEVEL", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    _settings.BACKEND = (env_str("PLAY_BACKEND", DEFAULT_BACKEND) or DEFAULT_BACKEND).lower()

    _settings.SC_HOST = env_str("PLAY_SC_HOST")
    _settings.SC_PORT = env_int("PLAY_SC_PORT", None, min_value=1, max_value=65535)
    _settings.SC_ADD_ACTION = env_int("PLAY_SC_ADD_ACTION", None, min_value=0)
    _settings.SC_TARGET = env_int("PLAY_SC_TARGET", None)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
