"""
どこで: `play.store`
何を: 音名 → `SynthDef` のレジストリ（追加/一覧/解決）。
なぜ: アプリが所有する唯一の共有可変状態として、一意性とスレッド安全性をここで保証するため。

- `add` は排他ロック、`list`/`lookup` は共有ロック（`common.base_registry`）。
- 削除 API は持たない。
- `list()` は出力せずに名前を返す（表示は `play.app` の責務）。
"""

from __future__ import annotations

import logging
from typing import Callable

from common.base_registry import BaseRegistry

from .errors import DuplicateNameError, NotFoundError
from .synthdef import GeneratorFn, SynthDef

logger = logging.getLogger(__name__)


class SynthDefStore:
    def __init__(self) -> None:
        self._registry = BaseRegistry(
            duplicate_error=DuplicateNameError,
            missing_error=NotFoundError,
        )

    def add(self, name: str, generator: GeneratorFn) -> SynthDef:
        """synthdef を作って登録する。

        例外:
        - DuplicateNameError: 既に同名がある（既存の登録は変更しない）。
        - TypeError / ValueError: 名前が str でない/空、または generator が呼び出し不可。
        """
        definition = SynthDef(name, generator)
        self._registry.add(name, definition)
        logger.debug("registered synthdef %r", name)
        return definition

    def register(self, name: str | None = None) -> Callable[[GeneratorFn], GeneratorFn]:
        """generator 関数を登録するデコレータ（名前省略時は関数名）。

        使用例:
        - `@store.register()`        → 関数名で登録
        - `@store.register("kick")`  → 明示名で登録
        """

        def decorator(fn: GeneratorFn) -> GeneratorFn:
            self.add(name if name is not None else fn.__name__, fn)
            return fn

        return decorator

    def list(self) -> list[str]:
        """登録済みの名前（順序は保証しない）。"""
        return self._registry.list_all()

    def lookup(self, name: str) -> SynthDef:
        """例外: NotFoundError（未登録名）。"""
        return self._registry.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __len__(self) -> int:
        return len(self._registry)


__all__ = ["SynthDefStore"]
