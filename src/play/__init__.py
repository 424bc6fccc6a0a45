"""
どこで: `play` パッケージ（公開 API）。
何を: 名前付き synthdef の登録・一覧・再生を行う小さなランタイムレジストリ。
なぜ: CLI から `key=value` で制御値を渡して音を鳴らす仕組みを、スレッド安全な形で提供するため。

構成:
- `store`: 音名 → SynthDef（RW ロック付き）
- `params`: `key=value` → ControlMap（float32）
- `dispatcher`: 解決 → 解析 → バックエンド
- `backends`: OSC 送信 / ログ出力
- `app`: argparse 配線と CLI 表示
"""

from .app import App, run_app
from .backends import LoggingBackend, OscBackend, PlaybackBackend, backend_from_settings
from .dispatcher import Dispatcher
from .errors import (
    DuplicateNameError,
    ErrorKind,
    InvalidNumberError,
    MalformedParamError,
    NotFoundError,
    ParamError,
    PlaybackError,
    PlayError,
    UnrecognizedSoundError,
)
from .params import ControlMap, parse_param, parse_params
from .store import SynthDefStore
from .synthdef import SynthDef

__all__ = [
    "App",
    "run_app",
    "SynthDefStore",
    "SynthDef",
    "Dispatcher",
    "ControlMap",
    "parse_param",
    "parse_params",
    "PlaybackBackend",
    "OscBackend",
    "LoggingBackend",
    "backend_from_settings",
    "ErrorKind",
    "PlayError",
    "DuplicateNameError",
    "NotFoundError",
    "UnrecognizedSoundError",
    "ParamError",
    "MalformedParamError",
    "InvalidNumberError",
    "PlaybackError",
]
