"""Defaults and demonstration word lists."""

from __future__ import annotations

DEFAULT_DATASET = "dictionary-dataset.txt"

# Lines starting with this marker are section headings, not words.
HEADING_MARKER = "#"

# ── Demonstration queries ───────────────────────────────────────────────

SEARCH_WORDS: list[str] = [
    "prefix", "data", "hello", "do", "workplace", "there",
    "pneumonia", "word2vec", "iPhone", "a-frame", "abc", "xyz",
]

PREFIXES: list[str] = ["pre", "pro", "work", "i", "e"]

# (heading, words) pairs searched after the prefix listing
CATEGORIES: list[tuple[str, list[str]]] = [
    ("short words", ["a", "an", "by"]),
    ("hyphenated words", ["e-mail", "t-shirt"]),
    ("words with numbers", ["24hours", "2day"]),
    ("mixed case words", ["JavaScript", "PowerPoint"]),
    ("special case words", [
        "psychology", "pterodactyl", "xylophone", "yacht",
        "eBay", "iPad", "x-ray",
    ]),
]

MISSING_WORDS: list[str] = ["abc", "xyz"]
