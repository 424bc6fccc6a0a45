"""
どこで: `util.utils`
何を: リポジトリ同梱の YAML 設定を読み、トップレベルの節を取り出す。
なぜ: scsynth の接続先などの既定値をコード外に置き、環境変数で上書きできる形にするため。

読み込み順（後の層がトップレベル単位で上書き）:
1) `configs/default.yaml`
2) `config.yaml`（ローカル上書き。リポジトリには含めない）

壊れた/辞書でないファイルは空の層として扱う（フェイルソフト）。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping

import yaml

logger = logging.getLogger(__name__)

_ROOT_MARKERS = (".git", "pyproject.toml", "configs")
_CONFIG_LAYERS = (Path("configs") / "default.yaml", Path("config.yaml"))


def _read_layer(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        logger.debug("ignoring unreadable config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.debug("ignoring non-mapping config %s", path)
        return {}
    return data


def _iter_layers(root: Path) -> Iterator[Dict[str, Any]]:
    for rel in _CONFIG_LAYERS:
        yield _read_layer(root / rel)


def _find_project_root(start: Path) -> Path:
    """`start` から上へ辿り、ルートの目印を持つ最初のディレクトリを返す。

    目印が無ければ `start` の 2 つ上（`<root>/src/util` を想定）を返す。
    """
    here = start.resolve()
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return here.parent.parent


def load_config(project_root: Path | None = None) -> Dict[str, Any]:
    """設定層を順に重ねた辞書を返す。ネストした節はマージしない。"""
    root = project_root or _find_project_root(Path(__file__).parent)
    merged: Dict[str, Any] = {}
    for layer in _iter_layers(root):
        merged.update(layer)
    return merged


def config_section(config: Mapping[str, Any], name: str) -> Dict[str, Any]:
    """トップレベルの節を辞書で返す（欠落/非辞書は空辞書）。"""
    section = config.get(name)
    return dict(section) if isinstance(section, dict) else {}


__all__ = ["load_config", "config_section"]
