"""
どこで: `play.errors`
何を: 登録/解決/パラメータ解析/再生の各段階で送出する例外の分類。
なぜ: 整形済み文字列ではなく種別（`kind`）と構造化フィールドで分岐できるようにするため。

各例外は組込み例外も継承する（重複名は ValueError、未登録名は LookupError 等）。
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    DUPLICATE_NAME = "duplicate_name"
    NOT_FOUND = "not_found"
    UNRECOGNIZED_SOUND = "unrecognized_sound"
    MALFORMED_PARAM = "malformed_param"
    INVALID_NUMBER = "invalid_number"
    PLAYBACK = "playback"


class PlayError(Exception):
    """play パッケージが送出する例外の基底。"""

    kind: ErrorKind


class DuplicateNameError(PlayError, ValueError):
    """同名の synthdef が既に登録されている。"""

    kind = ErrorKind.DUPLICATE_NAME

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"sound is already defined: {self.name!r}"


class NotFoundError(PlayError, LookupError):
    """名前に対応する synthdef が無い。"""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"sound is not defined: {self.name!r}"


class UnrecognizedSoundError(NotFoundError):
    """再生要求の音名が未登録（`Dispatcher.play` の最初の検査で送出）。"""

    kind = ErrorKind.UNRECOGNIZED_SOUND

    def __str__(self) -> str:
        return f"unrecognized sound: {self.name!r}"


class ParamError(PlayError, ValueError):
    """パラメータ解析段階の失敗（`param` は問題の生文字列）。"""

    def __init__(self, param: str) -> None:
        super().__init__(param)
        self.param = param


class MalformedParamError(ParamError):
    kind = ErrorKind.MALFORMED_PARAM

    def __str__(self) -> str:
        return f"could not parse key=value from {self.param!r}"


class InvalidNumberError(ParamError):
    """値部分が 32bit 浮動小数として解釈できない（原因は `__cause__`）。"""

    kind = ErrorKind.INVALID_NUMBER

    def __init__(self, param: str, value: str) -> None:
        super().__init__(param)
        self.value = value

    def __str__(self) -> str:
        msg = f"parsing control value {self.value!r} in {self.param!r}"
        if self.__cause__ is not None:
            msg = f"{msg}: {self.__cause__}"
        return msg


class PlaybackError(PlayError, RuntimeError):
    """バックエンドが再生に失敗した（原因は `__cause__`）。"""

    kind = ErrorKind.PLAYBACK

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        msg = f"playing synthdef {self.name!r}"
        if self.__cause__ is not None:
            msg = f"{msg}: {self.__cause__}"
        return msg


__all__ = [
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
