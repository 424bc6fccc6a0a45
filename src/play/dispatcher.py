"""
どこで: `play.dispatcher`
何を: 音名の解決 → パラメータ解析 → バックエンド呼び出しの順で再生を組み立てる。
なぜ: 検査順序（未登録名はパラメータより先に報告）と例外の包み方を一箇所で固定するため。
"""

from __future__ import annotations

import logging
from typing import Sequence

from .backends import PlaybackBackend
from .errors import NotFoundError, PlaybackError, UnrecognizedSoundError
from .params import parse_params
from .store import SynthDefStore

logger = logging.getLogger(__name__)


class Dispatcher:
    def __init__(self, store: SynthDefStore, backend: PlaybackBackend) -> None:
        self.store = store
        self.backend = backend

    def play(self, name: str, params: Sequence[str] = ()) -> None:
        """`name` の synthdef を `params`（`key=value` 列）で再生する。

        例外:
        - UnrecognizedSoundError: 未登録名（パラメータ解析より先に検査）。
        - MalformedParamError / InvalidNumberError: パラメータ解析の失敗（そのまま伝搬）。
        - PlaybackError: バックエンドの失敗（`__cause__` に元例外）。
        """
        try:
            definition = self.store.lookup(name)
        except NotFoundError:
            raise UnrecognizedSoundError(name) from None

        controls = parse_params(params)
        logger.debug("dispatching %r with %s", name, controls)
        try:
            self.backend.play(definition, controls)
        except Exception as exc:
            raise PlaybackError(name) from exc

    def run(self, list_flag: bool, sound: str, params: Sequence[str] = ()) -> list[str] | None:
        """CLI からの入口。`list_flag` なら名前一覧を返し、それ以外は `play` に委ねる。"""
        if list_flag:
            return self.store.list()
        self.play(sound, params)
        return None


__all__ = ["Dispatcher"]
