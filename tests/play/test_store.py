from __future__ import annotations

import dataclasses
import threading

import pytest

from play import DuplicateNameError, ErrorKind, NotFoundError, SynthDef, SynthDefStore


def kick() -> bytes:
    return b"kick"


def snare() -> bytes:
    return b"snare"


def test_add_returns_definition_and_lookup_is_identical(store: SynthDefStore) -> None:
    d = store.add("kick", kick)
    assert isinstance(d, SynthDef)
    assert d.name == "kick"
    assert d.build() == b"kick"
    assert store.lookup("kick") is d
    assert "kick" in store
    assert len(store) == 1


def test_duplicate_add_fails_and_keeps_first(store: SynthDefStore) -> None:
    first = store.add("kick", kick)
    with pytest.raises(DuplicateNameError) as ex:
        store.add("kick", snare)
    assert ex.value.name == "kick"
    assert ex.value.kind is ErrorKind.DUPLICATE_NAME
    assert isinstance(ex.value, ValueError)
    assert store.lookup("kick") is first
    assert store.lookup("kick").build() == b"kick"


def test_lookup_unknown(store: SynthDefStore) -> None:
    with pytest.raises(NotFoundError) as ex:
        store.lookup("missing")
    assert ex.value.name == "missing"
    assert ex.value.kind is ErrorKind.NOT_FOUND
    assert isinstance(ex.value, LookupError)


def test_list_is_exactly_the_registered_names(store: SynthDefStore) -> None:
    assert store.list() == []
    store.add("kick", kick)
    store.add("snare", snare)
    assert set(store.list()) == {"kick", "snare"}
    assert len(store.list()) == 2


def test_list_does_not_print(store: SynthDefStore, capsys: pytest.CaptureFixture[str]) -> None:
    store.add("kick", kick)
    store.list()
    assert capsys.readouterr().out == ""


def test_register_decorator(store: SynthDefStore) -> None:
    @store.register()
    def hat() -> bytes:
        return b"hat"

    @store.register("open_hat")
    def _open() -> bytes:
        return b"open"

    assert hat() == b"hat"  # 関数はそのまま返る
    assert set(store.list()) == {"hat", "open_hat"}
    assert store.lookup("open_hat").build() == b"open"


def test_generator_must_be_callable(store: SynthDefStore) -> None:
    with pytest.raises(TypeError):
        store.add("bad", b"not callable")  # type: ignore[arg-type]
    assert "bad" not in store


def test_synthdef_identity_is_its_name() -> None:
    assert SynthDef("a", kick) == SynthDef("a", snare)
    assert SynthDef("a", kick) != SynthDef("b", kick)
    with pytest.raises(dataclasses.FrozenInstanceError):
        SynthDef("a", kick).name = "b"  # type: ignore[misc]


def test_concurrent_adds_with_distinct_names(store: SynthDefStore) -> None:
    n = 64
    start = threading.Barrier(n)
    errors: list[BaseException] = []

    def worker(i: int) -> None:
        start.wait()
        try:
            store.add(f"sound_{i}", kick)
        except BaseException as exc:  # pragma: no cover - 失敗時の診断用
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5.0)

    assert errors == []
    assert set(store.list()) == {f"sound_{i}" for i in range(n)}


def test_concurrent_same_name_only_one_wins(store: SynthDefStore) -> None:
    n = 32
    start = threading.Barrier(n)
    wins: list[SynthDef] = []
    dups: list[DuplicateNameError] = []
    lock = threading.Lock()

    def worker() -> None:
        start.wait()
        try:
            d = store.add("kick", kick)
        except DuplicateNameError as exc:
            with lock:
                dups.append(exc)
        else:
            with lock:
                wins.append(d)

    threads = [threading.Thread(target=worker) for _ in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5.0)

    assert len(wins) == 1
    assert len(dups) == n - 1
    assert store.lookup("kick") is wins[0]


def test_readers_never_see_partial_entries(store: SynthDefStore) -> None:
    stop = threading.Event()
    problems: list[str] = []

    def reader() -> None:
        while not stop.is_set():
            for name in store.list():
                try:
                    d = store.lookup(name)
                except NotFoundError:
                    problems.append(f"listed but not found: {name}")
                    continue
                if d.name != name:
                    problems.append(f"name mismatch: {name} -> {d.name}")

    readers = [threading.Thread(target=reader) for _ in range(4)]
    for t in readers:
        t.start()
    try:
        for i in range(200):
            store.add(f"s{i}", kick)
    finally:
        stop.set()
        for t in readers:
            t.join(timeout=5.0)

    assert problems == []
    assert len(store) == 200
