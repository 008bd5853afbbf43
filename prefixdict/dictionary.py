"""Dataset loading: word list file -> trie."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from prefixdict.constants import DEFAULT_DATASET, HEADING_MARKER
from prefixdict.trie import Trie

log = logging.getLogger("prefixdict")


def read_words(path: str) -> list[str]:
    """Words from a dataset file, one per line, in file order.

    Lines are stripped; blank lines and ``#`` headings are skipped.
    A file that cannot be opened or decoded is logged and yields ``[]``.
    """
    words: list[str] = []
    try:
        f = open(path, "r", encoding="utf-8")
    except OSError as exc:
        log.error("Error opening file: %s (%s)", path, exc.strerror or exc)
        return words

    with f:
        try:
            for line in f:
                word = line.strip(" \t\r\n")
                if not word or word.startswith(HEADING_MARKER):
                    continue
                words.append(word)
        except UnicodeDecodeError as exc:
            log.error("Error reading file: %s is not valid UTF-8 (%s)", path, exc.reason)
            return []
    return words


class Dictionary:
    """Word list with a trie index for exact and prefix lookups."""

    def __init__(self, dict_path: str | None = None, *, autoload: bool = True):
        self.words: list[str] = []
        self.trie = Trie()
        self.path: str | None = None
        if autoload:
            self._load(dict_path)

    def _load(self, dict_path: str | None) -> None:
        # An explicit path is the only candidate; defaults apply when none is given.
        if dict_path:
            search_paths = [dict_path]
        else:
            search_paths = [
                DEFAULT_DATASET,
                os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", DEFAULT_DATASET),
            ]

        for path in search_paths:
            if os.path.exists(path):
                words = read_words(path)
                if words:
                    self.load(words)
                    self.path = path
                    log.info("Loaded %s words from %s", f"{len(self.words):,}", path)
                    return
                log.debug("No words in %s", path)
            elif path == dict_path:
                log.error("Error opening file: %s", path)

        if dict_path:
            log.warning("No words read from %s -- dictionary is empty.", dict_path)
        else:
            log.warning("No dataset file found -- dictionary is empty.")

    def load(self, words: Iterable[str]) -> int:
        """Index an in-memory sequence of words; returns how many were new."""
        words = list(words)
        self.words.extend(words)
        return self.trie.insert_many(words)

    def is_valid(self, word: str) -> bool:
        return self.trie.search(word)

    def __contains__(self, word: object) -> bool:
        return word in self.trie

    def __len__(self) -> int:
        return len(self.trie)
