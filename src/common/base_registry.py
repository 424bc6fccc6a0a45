"""
共通レジストリ基底クラス
名前 → オブジェクトの対応をスレッド安全に保持する（play.store が利用）。
"""

from __future__ import annotations

from typing import Any, Callable

from .rwlock import ReadWriteLock

ErrorFactory = Callable[[str], Exception]


def _default_duplicate_error(name: str) -> Exception:
    return ValueError(f"'{name}' is already registered")


def _default_missing_error(name: str) -> Exception:
    return KeyError(f"'{name}' is not registered")


class BaseRegistry:
    """レジストリの基底クラス。

    - キーは正規化しない（登録名がそのまま同一性になる）。
    - 登録は追加のみ。既存キーへの再登録は上書きせず例外にする。
    - 参照系は共有ロック、登録は排他ロックで保護する。
    - 例外の型は `duplicate_error` / `missing_error` で差し替え可能。
    """

    def __init__(
        self,
        *,
        duplicate_error: ErrorFactory = _default_duplicate_error,
        missing_error: ErrorFactory = _default_missing_error,
    ) -> None:
        # 登録対象の型は統一せず Any とする（関数/値の双方を許容）。
        self._registry: dict[str, Any] = {}
        self._lock = ReadWriteLock()
        self._duplicate_error = duplicate_error
        self._missing_error = missing_error

    # === 内部ユーティリティ ===
    @staticmethod
    def _validate_key(name: str) -> str:
        if not isinstance(name, str):
            raise TypeError(f"registry key must be str, got {type(name).__name__}")
        if not name:
            raise ValueError("registry key must not be empty")
        return name

    def add(self, name: str, obj: Any) -> Any:
        """`name` で `obj` を登録して返す。既存名なら `duplicate_error`。"""
        key = self._validate_key(name)
        with self._lock.write():
            if key in self._registry:
                raise self._duplicate_error(key)
            self._registry[key] = obj
        return obj

    def get(self, name: str) -> Any:
        """登録されたオブジェクトを取得。未登録なら `missing_error`。"""
        with self._lock.read():
            try:
                return self._registry[name]
            except KeyError:
                pass
        raise self._missing_error(name)

    def list_all(self) -> list[str]:
        """登録されているすべての名前を取得（順序は保証しない）。"""
        with self._lock.read():
            return list(self._registry.keys())

    def is_registered(self, name: str) -> bool:
        """指定された名前が登録されているかチェック"""
        with self._lock.read():
            return name in self._registry

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._registry)

    # 削除 API は提供しない（レジストリは縮まない）


__all__ = ["BaseRegistry", "ErrorFactory"]
