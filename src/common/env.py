"""
どこで: `common.env`
何を: 環境変数の軽量パースヘルパ（str/int）。
なぜ: `os.getenv` + 例外/境界ガードを `common.settings` の一箇所に寄せるため。

不正値は例外にせず既定値へフォールバックする（フェイルソフト）。
"""

from __future__ import annotations

import os
from typing import Optional

def env_str(name: str, default: Optional[str] = None, *, strip: bool = True) -> Optional[str]:
    """文字列環境変数を取得（未設定/空文字は既定値）。"""
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip() if strip else raw
    return value if value else default


def env_int(
    name: str,
    default: Optional[int] = None,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> Optional[int]:
    """整数環境変数を取得（存在しない/不正値は既定値）。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[int]
        既定値（`None` を渡すと `None` を許容）。
    min_value, max_value : Optional[int]
        範囲（指定時、はみ出た値は境界に丸める）。

    Returns
    -------
    Optional[int]
        取得した整数値。未設定/不正時は `default` を返す。
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    if max_value is not None and val > max_value:
        val = max_value
    return val


__all__ = ["env_str", "env_int"]
