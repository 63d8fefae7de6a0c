"""Tests for the suffix set builder and its frozen form."""

import threading

from domain_parser.suffix_set import SuffixSet, SuffixSetBuilder


def test_from_lines_skips_comments_and_blanks(suffixes):
    assert "com" in suffixes
    assert "co.uk" in suffixes
    assert not any(s.startswith("/") for s in suffixes)
    assert "" not in suffixes
    assert len(suffixes) == 10


def test_membership_is_exact_not_component_wise(suffixes):
    assert suffixes.contains("us.com")
    assert not suffixes.contains("us")
    assert not suffixes.contains("example.com")
    assert not suffixes.contains(".com")


def test_builder_add_is_idempotent():
    builder = SuffixSetBuilder()
    builder.add("com")
    builder.add("com")
    builder.add("COM")
    assert len(builder) == 1
    assert builder.freeze().contains("com")


def test_freeze_is_a_snapshot():
    builder = SuffixSetBuilder()
    builder.add("com")
    frozen = builder.freeze()
    builder.add("net")
    assert "net" not in frozen
    assert len(frozen) == 1


def test_frozen_set_has_no_add():
    assert not hasattr(SuffixSet(["com"]), "add")


def test_builder_concurrent_adds():
    builder = SuffixSetBuilder()

    def _load(offset: int) -> None:
        for i in range(500):
            builder.add(f"s{offset + i}")

    threads = [threading.Thread(target=_load, args=(n * 250,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    # Ranges overlap by half, so duplicates collapse
    assert len(builder) == 1250


def test_concurrent_reads(suffixes):
    hits: list[bool] = []
    lock = threading.Lock()

    def _read() -> None:
        found = all(suffixes.contains(s) for s in ("com", "co.uk", "us.com"))
        with lock:
            hits.append(found)

    threads = [threading.Thread(target=_read) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert hits == [True] * 8
