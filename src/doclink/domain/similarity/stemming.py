"""Deterministic stemming shared by the lookup-table and relatedness measures."""

from __future__ import annotations

from functools import lru_cache

from nltk.stem import PorterStemmer

_STEMMER = PorterStemmer()


@lru_cache(maxsize=8192)
def stem(word: str) -> str:
    """Return the lower-cased Porter stem of ``word``."""

    return _STEMMER.stem(word.strip().lower())
