"""
どこで: `play.synthdef`
何を: 名前とシグナル生成関数から作る不変の synthdef ハンドル。
なぜ: ストアが所有する「登録済み定義」の同一性を名前で固定し、中身はバックエンドに委ねるため。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

GeneratorFn = Callable[[], Any]


@dataclass(frozen=True)
class SynthDef:
    """登録済み synthdef。

    - `generator` は不透明なまま保持し、`build()` で呼び出す（例: コンパイル済み bytes を返す）。
    - 等価性/ハッシュは名前のみ。
    """

    name: str
    generator: GeneratorFn = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        if not callable(self.generator):
            raise TypeError(
                f"synthdef {self.name!r} needs a callable generator, got {type(self.generator).__name__}"
            )

    def build(self) -> Any:
        """シグナル記述を生成して返す。"""
        return self.generator()


__all__ = ["SynthDef", "GeneratorFn"]
