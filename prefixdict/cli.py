"""Terminal reporting, demonstration run and interactive query prompt."""

from __future__ import annotations

import logging
import time
from typing import Sequence

from prefixdict.constants import CATEGORIES, MISSING_WORDS, PREFIXES, SEARCH_WORDS
from prefixdict.dictionary import Dictionary
from prefixdict.trie import Trie

log = logging.getLogger("prefixdict")


# reporting

def report_insert(trie: Trie, word: str) -> None:
    trie.insert(word)
    print(f"Inserted word: '{word}' into the Trie.")


def report_search(trie: Trie, word: str) -> bool:
    found = trie.search(word)
    if found:
        print(f"Word '{word}' found in the Trie.")
    else:
        print(f"Word '{word}' not found in the Trie.")
    return found


def report_prefix(trie: Trie, prefix: str) -> bool:
    found = trie.starts_with(prefix)
    if found:
        print(f"There are words starting with prefix '{prefix}' in the Trie.")
    else:
        print(f"No words starting with prefix '{prefix}' found in the Trie.")
    return found


def report_words_with_prefix(trie: Trie, prefix: str) -> list[str]:
    words = trie.find_words_with_prefix(prefix)
    if not words:
        print(f"No words starting with prefix '{prefix}' found in the Trie.")
        return words
    print(f"Words starting with prefix '{prefix}':")
    for word in words:
        print(word)
    return words


# demonstration

def run_demo(words: Sequence[str], echo_inserts: bool = True) -> Trie:
    """Build a trie from *words* and run the fixed set of demo queries."""
    trie = Trie()

    print("\nInserting words into the Trie:")
    t0 = time.time()
    for word in words:
        if echo_inserts:
            report_insert(trie, word)
        else:
            trie.insert(word)
    log.debug("Inserted %d words (%d nodes) in %.3fs",
              len(trie), trie.node_count, time.time() - t0)

    print("\nSearching for words in the Trie:")
    for word in SEARCH_WORDS:
        report_search(trie, word)

    print("\nFinding words with given prefixes:")
    for prefix in PREFIXES:
        report_words_with_prefix(trie, prefix)

    for heading, group in CATEGORIES:
        print(f"\nSearching for {heading}:")
        for word in group:
            report_search(trie, word)

    # Misses come back as False; there is nothing to catch.
    print("\nHandling exceptions and memory management:")
    for word in MISSING_WORDS:
        report_search(trie, word)

    return trie


# interactive prompt

HELP = (
    "Commands:\n"
    "  search WORD   -- exact lookup          (e.g. search e-mail)\n"
    "  prefix P      -- any word starts with P (e.g. prefix pre)\n"
    "  find P        -- list words starting with P\n"
    "  add WORD      -- insert a word\n"
    "  count         -- number of stored words\n"
    "  help          -- show this message\n"
    "  done          -- quit"
)


def run_interactive(dictionary: Dictionary) -> None:
    """Read commands from the terminal until ``done`` or EOF."""
    trie = dictionary.trie
    print("\n" + "=" * 60)
    print("  PREFIX DICTIONARY -- Interactive Queries")
    print("=" * 60)
    print()
    print(HELP)
    print()

    while True:
        try:
            inp = input("  query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue
        cmd, _, arg = inp.partition(" ")
        cmd = cmd.lower()
        arg = arg.strip()

        if cmd == "done":
            break
        if cmd == "help":
            print(HELP)
            continue
        if cmd == "count":
            print(f"  {len(trie):,} words, {trie.node_count:,} nodes")
            continue

        # every remaining command takes one argument; "prefix"/"find" accept ""
        if cmd not in ("search", "prefix", "find", "add"):
            print("  Unknown command.  Type 'help' for the list.")
            continue
        if not arg and cmd in ("search", "add"):
            print(f"  Usage: {cmd} WORD")
            continue

        t0 = time.time()
        if cmd == "search":
            report_search(trie, arg)
        elif cmd == "prefix":
            report_prefix(trie, arg)
        elif cmd == "find":
            words = report_words_with_prefix(trie, arg)
            if words:
                print(f"  ({len(words)} matches)")
        else:
            dictionary.load([arg])
            print(f"Inserted word: '{arg}' into the Trie.")
        log.debug("%s %r took %.6fs", cmd, arg, time.time() - t0)
