"""Load word lists into the lookup set used by the checker."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

LOGGER = logging.getLogger(__name__)


def build_dictionary(words: Iterable[str]) -> frozenset[str]:
    """Return a lowercase, deduplicated dictionary built from ``words``.

    Entries are stripped of surrounding whitespace (so ``\\r\\n`` word lists
    work) and blank entries are dropped.
    """

    entries: set[str] = set()
    for word in words:
        normalised = word.strip().lower()
        if normalised:
            entries.add(normalised)
    return frozenset(entries)


def load_dictionary(
    path: Path,
    *,
    encoding: str = "utf-8",
    extra_words: Iterable[str] | None = None,
) -> frozenset[str]:
    """Read a one-word-per-line file into a dictionary.

    Args:
            path: Word list to read.
            encoding: Text encoding of the word list.
            extra_words: Additional words to accept for this run.

    Raises:
            OSError: If the file cannot be opened or read.
            UnicodeDecodeError: If the file does not match ``encoding``.
    """

    with path.open("r", encoding=encoding) as handle:
        dictionary = build_dictionary(handle)

    if not dictionary:
        LOGGER.warning("Dictionary %s is empty; every word will be reported", path)

    if extra_words:
        dictionary = dictionary | build_dictionary(extra_words)

    LOGGER.debug("Loaded %d word(s) from %s", len(dictionary), path)
    return dictionary
