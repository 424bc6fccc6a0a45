"""
どこで: `util` パッケージ。
何を: YAML 設定の読み込みなど、I/O を伴う小さなヘルパ。
"""
