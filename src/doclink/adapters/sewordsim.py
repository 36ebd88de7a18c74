"""SQLAlchemy-backed reader for the precomputed stem similarity table.

The table is a plain SQLite file with one table::

    wsim(term_1 TEXT, term_2 TEXT, similarity REAL)

It is opened read-only and never written to.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Self

from sqlalchemy import Column, Float, MetaData, String, Table, create_engine, inspect, select
from sqlalchemy.exc import SQLAlchemyError

from doclink.domain.similarity import MeasureUnavailableError

if TYPE_CHECKING:
    from pathlib import Path
    from types import TracebackType

    from sqlalchemy import Engine

log = logging.getLogger(__name__)

WORDSIM_TABLE: Final[str] = "wsim"

metadata = MetaData()

wsim_table = Table(
    WORDSIM_TABLE,
    metadata,
    Column("term_1", String, nullable=False),
    Column("term_2", String, nullable=False),
    Column("similarity", Float, nullable=False),
)


def read_only_sqlite_uri(path: Path) -> str:
    return f"sqlite+pysqlite:///file:{path}?mode=ro&uri=true"


@dataclass(slots=True)
class SqlAlchemyWordSimDataSource:
    engine: Engine

    @classmethod
    def open(cls, path: Path) -> Self:
        """Open ``path`` read-only, checking that the lookup table exists."""

        resolved = path.expanduser().resolve()
        if not resolved.is_file():
            raise MeasureUnavailableError(f"lookup table file {resolved} does not exist")

        engine = create_engine(read_only_sqlite_uri(resolved), future=True)
        try:
            has_table = inspect(engine).has_table(WORDSIM_TABLE)
        except SQLAlchemyError as exc:
            engine.dispose()
            raise MeasureUnavailableError(
                f"cannot read lookup table file {resolved}: {exc}"
            ) from exc
        if not has_table:
            engine.dispose()
            raise MeasureUnavailableError(f"{resolved} has no {WORDSIM_TABLE!r} table")

        log.info("Opened word similarity table %s", resolved)
        return cls(engine=engine)

    def similarity(self, first_stem: str, second_stem: str) -> float | None:
        stmt = (
            select(wsim_table.c.similarity)
            .where(wsim_table.c.term_1 == first_stem, wsim_table.c.term_2 == second_stem)
            .limit(1)
        )
        value = self._scalar(stmt)
        return None if value is None else float(value)

    def close(self) -> None:
        self.engine.dispose()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def _scalar(self, stmt: object) -> object | None:
        try:
            with self.engine.connect() as connection:
                return connection.execute(stmt).scalar()  # type: ignore[arg-type]
        except SQLAlchemyError as exc:
            raise MeasureUnavailableError(f"lookup table query failed: {exc}") from exc
