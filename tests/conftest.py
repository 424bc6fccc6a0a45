"""共通フィクスチャ。

- PLAY_* 環境変数を毎テストで隔離
- 呼び出しを記録するテスト用バックエンド
- 空のストア / App
"""

from __future__ import annotations

import argparse
import threading
from typing import Iterator, Mapping

import pytest

from common import settings
from play import App, SynthDef, SynthDefStore

PLAY_ENV_VARS = (
    "PLAY_LOG_LEVEL",
    "PLAY_BACKEND",
    "PLAY_SC_HOST",
    "PLAY_SC_PORT",
    "PLAY_SC_ADD_ACTION",
    "PLAY_SC_TARGET",
)


class RecordingBackend:
    """`play` 呼び出しを記録し、必要なら指定の例外を送出する。"""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[SynthDef, Mapping[str, float]]] = []
        self.error = error
        self._lock = threading.Lock()

    def play(self, definition: SynthDef, controls: Mapping[str, float]) -> None:
        with self._lock:
            self.calls.append((definition, controls))
        if self.error is not None:
            raise self.error


@pytest.fixture(autouse=True)
def clean_play_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in PLAY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture()
def store() -> SynthDefStore:
    return SynthDefStore()


@pytest.fixture()
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture()
def app(backend: RecordingBackend) -> App:
    return App(backend=backend, parser=argparse.ArgumentParser(prog="sounds"))
