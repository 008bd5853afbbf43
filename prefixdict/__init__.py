"""Prefix Dictionary: trie-indexed word list."""

from prefixdict.trie import Trie, TrieNode
from prefixdict.dictionary import Dictionary, read_words

__all__ = [
    "Dictionary",
    "Trie",
    "TrieNode",
    "read_words",
]
