"""
プロジェクト共通のロギング初期化。

各モジュールは `logging.getLogger(__name__)` でロガーを取得するだけにし、
ハンドラ構成は CLI の入口（`play.app.run_app`）で一度だけ行う。
"""

from __future__ import annotations

import logging

from . import settings as _settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = _settings.get().LOG_LEVEL
    if isinstance(level, str):
        lvl = logging.getLevelName(level.strip().upper())
        # 未知の名前は "Level X" 文字列が返る
        return lvl if isinstance(lvl, int) else logging.INFO
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """ルートロガーを一度だけ構成する。

    - ルートに既にハンドラがあれば何もしない（アプリ/テスト側の構成を尊重）
    - `level` 省略時は `PLAY_LOG_LEVEL`（既定 INFO）
    """
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=_resolve_level(level), format=LOG_FORMAT)


__all__ = ["setup_default_logging", "LOG_FORMAT"]
