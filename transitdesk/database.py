"""SQLite storage shared by the record repositories."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from os import PathLike
from typing import Any

_SCHEMA = """
CREATE TABLE IF NOT EXISTS bus (
    ID INTEGER PRIMARY KEY,
    MATRICULE TEXT,
    MARQUE TEXT,
    ETAT TEXT,
    CAPACITE INTEGER,
    CHAUFFEUR TEXT,
    DISPONIBILITE TEXT
);
CREATE TABLE IF NOT EXISTS employe (
    ID INTEGER PRIMARY KEY,
    NOM TEXT,
    PRENOM TEXT,
    ADRESSE TEXT,
    TELEPHONE TEXT,
    CIN TEXT
);
CREATE TABLE IF NOT EXISTS tabtrajet (
    NUM INTEGER PRIMARY KEY,
    BUS TEXT,
    STATIOND TEXT,
    DATED TEXT,
    STATIONA TEXT,
    DATEA TEXT
);
CREATE TABLE IF NOT EXISTS convention (
    NUMCONVENTION INTEGER PRIMARY KEY,
    NOM2EMEPARTIE TEXT,
    MONTANTAPAYER TEXT,
    DATEE TEXT,
    NOTE TEXT
);
CREATE TABLE IF NOT EXISTS reservation (
    NUMRESERVATION INTEGER PRIMARY KEY AUTOINCREMENT,
    NOMBREDEPLACE INTEGER,
    PRIX REAL,
    TRAJETD TEXT,
    DATED TEXT,
    ADRESSEEMAIL TEXT,
    TRAJETA TEXT,
    DATEA TEXT
);
CREATE TABLE IF NOT EXISTS promotion (
    ID TEXT PRIMARY KEY,
    NOM TEXT,
    DATEDEBUT TEXT,
    DATEFIN TEXT,
    CONTENU TEXT
);
"""


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


@dataclass(frozen=True)
class Table:
    """A query result with display headers, ready to be shown as a grid."""

    headers: tuple[str, ...]
    rows: tuple[tuple[Any, ...], ...] = ()

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        return iter(self.rows)

    def column(self, name: str) -> list[Any]:
        """Return every value of the column with the given header."""
        try:
            index = self.headers.index(name)
        except ValueError:
            raise KeyError(name) from None
        return [row[index] for row in self.rows]


class Database:
    """A connection to the application's SQLite database."""

    def __init__(self, path: str | PathLike[str] = ":memory:") -> None:
        self.path = str(path)
        self._conn: sqlite3.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> Database:
        """Open the connection; raise DatabaseError if that is impossible."""
        if self._conn is None:
            try:
                self._conn = sqlite3.connect(self.path)
            except sqlite3.Error as exc:
                raise DatabaseError(f"cannot open database {self.path!r}: {exc}") from exc
        return self

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> Database:
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise DatabaseError("database is not open")
        return self._conn

    def create_schema(self) -> None:
        """Create every table the application uses, if missing."""
        conn = self._connection()
        try:
            conn.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def execute(self, sql: str, params: Sequence[Any] | dict[str, Any] = ()) -> int:
        """Run a modifying statement, commit it and return the affected row count."""
        conn = self._connection()
        try:
            cursor = conn.execute(sql, params)
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise DatabaseError(str(exc)) from exc
        return cursor.rowcount

    def _select(self, sql: str, params: Sequence[Any] | dict[str, Any]) -> sqlite3.Cursor:
        conn = self._connection()
        try:
            return conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def query(
        self, sql: str, params: Sequence[Any] | dict[str, Any] = ()
    ) -> list[tuple[Any, ...]]:
        """Run a query and return its rows."""
        return self._select(sql, params).fetchall()

    def table(
        self,
        sql: str,
        params: Sequence[Any] | dict[str, Any] = (),
        headers: Sequence[str] | None = None,
    ) -> Table:
        """Run a query and return a Table.

        Headers replace the column names position by position; extra headers
        beyond the number of columns are ignored.
        """
        cursor = self._select(sql, params)
        rows = tuple(cursor.fetchall())
        names = [description[0] for description in cursor.description or ()]
        for index, header in enumerate(list(headers or ())[: len(names)]):
            names[index] = header
        return Table(tuple(names), rows)