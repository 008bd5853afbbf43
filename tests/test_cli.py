"""Tests for terminal reporting, the demo run and the entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

import prefix_dictionary
from prefixdict.cli import (
    report_prefix,
    report_search,
    report_words_with_prefix,
    run_demo,
    run_interactive,
)
from prefixdict.dictionary import Dictionary
from prefixdict.trie import Trie

WORDS = [
    "a", "an", "by", "do", "data", "hello", "prefix", "present", "pro",
    "work", "workplace", "e-mail", "t-shirt", "24hours", "JavaScript", "iPad",
]


def test_report_search_messages(capsys: pytest.CaptureFixture[str]) -> None:
    trie = Trie(["do", "data"])
    assert report_search(trie, "do") is True
    assert report_search(trie, "d") is False
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Word 'do' found in the Trie.",
        "Word 'd' not found in the Trie.",
    ]


def test_report_prefix_messages(capsys: pytest.CaptureFixture[str]) -> None:
    trie = Trie(["do"])
    assert report_prefix(trie, "d") is True
    assert report_prefix(trie, "x") is False
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "There are words starting with prefix 'd' in the Trie.",
        "No words starting with prefix 'x' found in the Trie.",
    ]


def test_report_words_with_prefix(capsys: pytest.CaptureFixture[str]) -> None:
    trie = Trie(["work", "workplace", "do"])
    assert report_words_with_prefix(trie, "work") == ["work", "workplace"]
    assert report_words_with_prefix(trie, "x") == []
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Words starting with prefix 'work':",
        "work",
        "workplace",
        "No words starting with prefix 'x' found in the Trie.",
    ]


def test_run_demo_output(capsys: pytest.CaptureFixture[str]) -> None:
    trie = run_demo(WORDS)
    out = capsys.readouterr().out

    assert len(trie) == len(WORDS)
    assert "Inserted word: 'e-mail' into the Trie." in out
    assert "Word 'prefix' found in the Trie." in out
    assert "Word 'xyz' not found in the Trie." in out
    assert "Words starting with prefix 'pre':\nprefix\npresent\n" in out
    assert "No words starting with prefix 'i' found in the Trie." not in out
    assert "Words starting with prefix 'i':\niPad\n" in out
    assert "Word 'javascript' not found" not in out
    assert "Word 'JavaScript' found in the Trie." in out
    for heading in (
        "Inserting words into the Trie:",
        "Searching for words in the Trie:",
        "Finding words with given prefixes:",
        "Searching for short words:",
        "Searching for hyphenated words:",
        "Searching for words with numbers:",
        "Searching for mixed case words:",
        "Searching for special case words:",
        "Handling exceptions and memory management:",
    ):
        assert heading in out


def test_run_demo_quiet(capsys: pytest.CaptureFixture[str]) -> None:
    run_demo(WORDS, echo_inserts=False)
    out = capsys.readouterr().out
    assert "Inserted word:" not in out
    assert "Word 'hello' found in the Trie." in out


def test_run_interactive(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    d = Dictionary(autoload=False)
    d.load(["cart", "car"])
    commands = iter([
        "search car", "search ca", "prefix ca", "find car",
        "add cat", "find ca", "count", "search", "bogus", "", "done",
        "search never-reached",
    ])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(commands))

    run_interactive(d)
    out = capsys.readouterr().out

    assert "Word 'car' found in the Trie." in out
    assert "Word 'ca' not found in the Trie." in out
    assert "There are words starting with prefix 'ca' in the Trie." in out
    assert "Words starting with prefix 'car':\ncar\ncart\n" in out
    assert "Inserted word: 'cat' into the Trie." in out
    assert "(3 matches)" in out
    assert "3 words" in out
    assert "Usage: search WORD" in out
    assert "Unknown command." in out
    assert "never-reached" not in out
    assert d.is_valid("cat")


def test_run_interactive_stops_on_eof(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_input(_prompt: str = "") -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    run_interactive(Dictionary(autoload=False))


def test_main_runs_demo(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "words.txt"
    path.write_text("# heading\nprefix\ndata\n", encoding="utf-8")

    assert prefix_dictionary.main(["--dict", str(path), "--quiet"]) == 0
    out = capsys.readouterr().out
    assert "Word 'data' found in the Trie." in out
    assert "Word 'hello' not found in the Trie." in out


def test_main_without_words_exits_1(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("prefixdict.dictionary.DEFAULT_DATASET", "no-such-dataset.txt")
    empty = tmp_path / "empty.txt"
    empty.write_text("# only a heading\n\n", encoding="utf-8")

    assert prefix_dictionary.main(["--dict", str(empty)]) == 1
    assert "No words were read from the file." in capsys.readouterr().out


def test_main_missing_dict_exits_1_even_with_default_dataset(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / "dictionary-dataset.txt").write_text("# words\ndata\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert prefix_dictionary.main(["--dict", str(tmp_path / "nope.txt"), "-q"]) == 1
    out = capsys.readouterr().out
    assert "No words were read from the file." in out
    assert "Word 'data' found" not in out


def test_main_invalid_utf8_dict_exits_1(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9\n")

    assert prefix_dictionary.main(["--dict", str(path)]) == 1
    assert "No words were read from the file." in capsys.readouterr().out
