"""
どこで: `play.params`
何を: `key=value` 形式の生パラメータ列を ControlMap（名前 → 32bit float）へ変換。
なぜ: 型なしの CLI 引数を、バックエンドへ渡す前に検証済みの数値へ揃えるため。

方針:
- 分割は最初の `=` のみ（`a=b=c` は key=`a`, value=`b=c` → 数値でないため失敗）。
- key はそのまま使う（trim/大文字小文字の正規化なし、空 key も許容）。同じ key は後勝ち。
- 値は float32 に丸めた上で Python の float として保持する。
- 1 つでも失敗したら全体が失敗（部分結果は返さない）。
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .errors import InvalidNumberError, MalformedParamError

ControlMap = dict[str, float]

_INF_SPELLINGS = {"inf", "infinity"}


def _to_float32(text: str) -> float:
    # float() は前後空白・"_" 区切り・非 ASCII 数字を受け付けるが、数値リテラルとしては扱わない
    if not text.isascii():
        raise ValueError("non-ASCII characters are not allowed")
    if text != text.strip():
        raise ValueError("surrounding whitespace is not allowed")
    if "_" in text:
        raise ValueError("digit separators are not allowed")
    value = float(text)
    with np.errstate(over="ignore"):
        single = np.float32(value)
    if np.isinf(single) and text.lstrip("+-").lower() not in _INF_SPELLINGS:
        raise ValueError(f"value out of range for float32: {text}")
    return float(single)


def parse_param(param: str) -> tuple[str, float]:
    """単一の `key=value` を (key, value) に変換する。

    例外:
    - MalformedParamError: `=` を含まない。
    - InvalidNumberError: 値が 32bit 浮動小数として解釈できない。
    """
    key, sep, raw_value = param.partition("=")
    if not sep:
        raise MalformedParamError(param)
    try:
        value = _to_float32(raw_value)
    except ValueError as exc:
        raise InvalidNumberError(param, raw_value) from exc
    return key, value


def parse_params(params: Iterable[str]) -> ControlMap:
    """生パラメータ列を ControlMap に変換する（後勝ち）。"""
    controls: ControlMap = {}
    for param in params:
        key, value = parse_param(param)
        controls[key] = value
    return controls


__all__ = ["ControlMap", "parse_param", "parse_params"]
