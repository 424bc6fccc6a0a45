"""
どこで: `common` パッケージ。
何を: play から使う軽量な共通基盤（BaseRegistry / ReadWriteLock / 設定 / ロギング）。
なぜ: ドメイン非依存の土台を分離し、依存の向きを単純化するため。
"""

from .base_registry import BaseRegistry
from .rwlock import ReadWriteLock

__all__ = [
    "BaseRegistry",
    "ReadWriteLock",
]
