"""Adapters to similarity resources on disk."""

from __future__ import annotations

from .sewordsim import SqlAlchemyWordSimDataSource, read_only_sqlite_uri, wsim_table
from .wordnet import WordNetLexicalDatabase, english_stop_words, open_wordnet_relatedness

__all__ = [
    "SqlAlchemyWordSimDataSource",
    "WordNetLexicalDatabase",
    "english_stop_words",
    "open_wordnet_relatedness",
    "read_only_sqlite_uri",
    "wsim_table",
]
