"""
どこで: `play.app`（公開エントリポイント）。
何を: synthdef 群を登録し、`-l`（一覧）/`-s SOUND`（再生）を持つコマンドラインアプリを組み立てる。
なぜ: ストア/ディスパッチャ/バックエンドの配線と CLI 表示（一覧の出力・エラー終了）を
    コアから切り離すため。

使用例:
    from play import App, run_app

    app = App()
    app.add("kick", kick_fn)
    app.add("snare", snare_fn)
    raise SystemExit(run_app(app))

    $ python mysounds.py -l
    $ python mysounds.py -s kick freq=55 amp=0.8
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO, Sequence

from common.logging import setup_default_logging

from .backends import PlaybackBackend, backend_from_settings
from .dispatcher import Dispatcher
from .errors import PlayError
from .store import SynthDefStore
from .synthdef import GeneratorFn, SynthDef

logger = logging.getLogger(__name__)


class App:
    """synthdef を操作するコマンドラインアプリ。

    Parameters
    ----------
    backend : PlaybackBackend | None
        再生バックエンド。省略時は `backend_from_settings()`（PLAY_BACKEND / scsynth 設定）。
    parser : argparse.ArgumentParser | None
        フラグを追加するパーサ。省略時は新規作成する。呼び出し側の独自フラグと共存できる。
    """

    def __init__(
        self,
        backend: PlaybackBackend | None = None,
        parser: argparse.ArgumentParser | None = None,
    ) -> None:
        self.store = SynthDefStore()
        self.dispatcher = Dispatcher(
            self.store, backend if backend is not None else backend_from_settings()
        )
        self.parser = parser if parser is not None else argparse.ArgumentParser()
        self.parser.add_argument("-l", "--list", action="store_true", help="list sounds")
        self.parser.add_argument("-s", "--sound", default="", metavar="SOUND", help="play a sound")
        self.parser.add_argument(
            "params", nargs="*", metavar="key=value", help="control values for the sound"
        )

        # parse_args() で設定される
        self.list_flag = False
        self.sound = ""
        self.params: list[str] = []

    @property
    def backend(self) -> PlaybackBackend:
        return self.dispatcher.backend

    def add(self, name: str, generator: GeneratorFn) -> SynthDef:
        """synthdef を登録する（同名があれば DuplicateNameError）。"""
        return self.store.add(name, generator)

    def list(self) -> list[str]:
        return self.store.list()

    def play(self, sound: str, params: Sequence[str] = ()) -> None:
        self.dispatcher.play(sound, params)

    def parse_args(self, argv: Sequence[str] | None = None) -> argparse.Namespace:
        """フラグを解析して保持する。不正なフラグは argparse が SystemExit(2)。"""
        ns = self.parser.parse_args(argv)
        self.list_flag = bool(ns.list)
        self.sound = ns.sound
        self.params = list(ns.params)
        return ns

    def run(self, params: Sequence[str] | None = None, *, out: IO[str] | None = None) -> None:
        """解析済みフラグに従って一覧表示または再生する。

        `params` 省略時は `parse_args()` で得た位置引数を使う。一覧は名前順に 1 行ずつ出力する。
        """
        names = self.dispatcher.run(
            self.list_flag, self.sound, self.params if params is None else params
        )
        if names is not None:
            stream = out if out is not None else sys.stdout
            for name in sorted(names):
                print(name, file=stream)


def run_app(
    app: App,
    argv: Sequence[str] | None = None,
    *,
    out: IO[str] | None = None,
    err: IO[str] | None = None,
) -> int:
    """CLI の入口。成功で 0、`PlayError` はメッセージを表示して 1 を返す。"""
    setup_default_logging()
    app.parse_args(argv)
    try:
        app.run(out=out)
    except PlayError as exc:
        logger.debug("command failed", exc_info=True)
        print(f"error: {exc}", file=err if err is not None else sys.stderr)
        return 1
    return 0


__all__ = ["App", "run_app"]
