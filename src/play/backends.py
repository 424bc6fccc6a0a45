"""
どこで: `play.backends`
何を: 再生バックエンドの契約（`PlaybackBackend`）と、OSC 送信/ログ出力の 2 実装。
なぜ: 合成エンジン本体は外部に置き、ディスパッチャからは `play(definition, controls)` だけを
    見るようにするため（テストでは差し替える）。

OscBackend の送信内容（scsynth のコマンド）:
- `/d_recv <blob>`: `definition.build()` が bytes を返した場合のみ、名前ごとに初回だけ送る。
- `/s_new <name> -1 <add_action> <target> k1 v1 k2 v2 ...`: ノード ID は自動採番（-1）。
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping, Protocol

from common import settings as _settings_mod
from common.settings import _Settings
from util.utils import config_section, load_config

from .synthdef import SynthDef

logger = logging.getLogger(__name__)

DEFAULT_SC_HOST = "127.0.0.1"
DEFAULT_SC_PORT = 57110
DEFAULT_ADD_ACTION = 0  # addToHead
DEFAULT_TARGET = 1  # default group


class PlaybackBackend(Protocol):
    def play(self, definition: SynthDef, controls: Mapping[str, float]) -> None: ...


class OscBackend:
    """OSC/UDP で synthdef を送り、シンセを生成する。"""

    def __init__(
        self,
        host: str = DEFAULT_SC_HOST,
        port: int = DEFAULT_SC_PORT,
        *,
        add_action: int = DEFAULT_ADD_ACTION,
        target: int = DEFAULT_TARGET,
        client: Any | None = None,
    ) -> None:
        self.host = host
        self.port = port
        self.add_action = add_action
        self.target = target
        self._client = client
        self._sent: set[str] = set()
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"OscBackend(host={self.host!r}, port={self.port})"

    def _get_client(self) -> Any:
        with self._lock:
            if self._client is None:
                from pythonosc.udp_client import SimpleUDPClient

                self._client = SimpleUDPClient(self.host, self.port)
            return self._client

    def _ensure_loaded(self, client: Any, definition: SynthDef) -> None:
        with self._lock:
            if definition.name in self._sent:
                return
            payload = definition.build()
            if isinstance(payload, (bytes, bytearray)):
                client.send_message("/d_recv", [bytes(payload)])
                logger.debug("sent /d_recv for %r (%d bytes)", definition.name, len(payload))
            self._sent.add(definition.name)

    def play(self, definition: SynthDef, controls: Mapping[str, float]) -> None:
        client = self._get_client()
        self._ensure_loaded(client, definition)
        args: list[Any] = [definition.name, -1, self.add_action, self.target]
        for key in sorted(controls):
            args.extend([key, float(controls[key])])
        client.send_message("/s_new", args)


class LoggingBackend:
    """音を出さずに呼び出しを記録するだけのバックエンド（ドライラン用）。"""

    def __init__(self) -> None:
        self.history: list[tuple[str, dict[str, float]]] = []
        self._lock = threading.Lock()

    def play(self, definition: SynthDef, controls: Mapping[str, float]) -> None:
        with self._lock:
            self.history.append((definition.name, dict(controls)))
        logger.info("play %s %s", definition.name, dict(controls))


def _pick(*values: Any) -> Any:
    for v in values:
        if v is not None:
            return v
    return None


def backend_from_settings(
    settings: _Settings | None = None, config: Mapping[str, Any] | None = None
) -> PlaybackBackend:
    """設定（環境変数 > YAML > 既定値）からバックエンドを構築する。

    例外:
    - ValueError: `PLAY_BACKEND` が未知の名前。
    """
    s = settings if settings is not None else _settings_mod.get()
    name = s.BACKEND
    if name == "log":
        return LoggingBackend()
    if name != "osc":
        raise ValueError(f"unknown playback backend: {name!r} (expected 'osc' or 'log')")

    cfg = config_section(config if config is not None else load_config(), "scsynth")
    try:
        port = int(_pick(s.SC_PORT, cfg.get("port"), DEFAULT_SC_PORT))
        add_action = int(_pick(s.SC_ADD_ACTION, cfg.get("add_action"), DEFAULT_ADD_ACTION))
        target = int(_pick(s.SC_TARGET, cfg.get("target"), DEFAULT_TARGET))
    except (TypeError, ValueError):
        logger.warning("invalid scsynth config %r; using defaults", cfg)
        port, add_action, target = DEFAULT_SC_PORT, DEFAULT_ADD_ACTION, DEFAULT_TARGET
    host = str(_pick(s.SC_HOST, cfg.get("host"), DEFAULT_SC_HOST))
    return OscBackend(host, port, add_action=add_action, target=target)


__all__ = [
    "PlaybackBackend",
    "OscBackend",
    "LoggingBackend",
    "backend_from_settings",
    "DEFAULT_SC_HOST",
    "DEFAULT_SC_PORT",
]
