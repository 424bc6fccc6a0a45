#!/usr/bin/env python3
"""
チュートリアル 01: synthdef を登録して CLI から鳴らす

    python tutorials/01_quickstart.py -l
    python tutorials/01_quickstart.py -s default freq=220 amp=0.3
    PLAY_BACKEND=log python tutorials/01_quickstart.py -s ping freq=880

generator が bytes（コンパイル済み synthdef）を返すと、初回再生時に `/d_recv` で送られる。
None を返す場合はサーバ側に同名の synthdef がロード済みである前提。
"""

import os
import sys
from pathlib import Path

SRC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, "src"))
try:
    while SRC_DIR in sys.path:
        sys.path.remove(SRC_DIR)
except ValueError:
    pass
sys.path.insert(0, SRC_DIR)

from play import App, run_app

app = App()

# scsynth 起動時に読み込まれる "default" をそのまま使う
app.add("default", lambda: None)


# コンパイル済みファイルがあれば送る（例: sclang で書き出した ping.scsyndef）
@app.store.register()
def ping():
    path = Path(__file__).with_name("ping.scsyndef")
    return path.read_bytes() if path.exists() else None


if __name__ == "__main__":
    raise SystemExit(run_app(app))
