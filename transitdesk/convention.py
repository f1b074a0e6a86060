"""Conventions: agreements signed with a second party, with the amount due."""

from __future__ import annotations

from dataclasses import dataclass

from transitdesk.database import Database, Table

CONVENTION_HEADERS = ("NumConvention", "Nom2emepartie", "Montantapayer ", "date", "Note")

_COLUMNS = "NUMCONVENTION, NOM2EMEPARTIE, MONTANTAPAYER, DATEE, NOTE"


@dataclass(frozen=True)
class Convention:
    """One convention record."""

    number: int = 0
    other_party: str = ""
    amount: str = ""
    date: str = ""
    note: str = ""

    def _values(self) -> tuple:
        return (self.number, self.other_party, self.amount, self.date, self.note)


class ConventionRepository:
    """Stores conventions in the convention table."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def add(self, convention: Convention) -> None:
        """Insert a convention; raise DatabaseError if the number is taken."""
        self.db.execute(
            f"INSERT INTO convention ({_COLUMNS}) VALUES (?, ?, ?, ?, ?)",
            convention._values(),
        )

    def list(self) -> Table:
        """All conventions, ordered by date."""
        return self.db.table(
            f"SELECT {_COLUMNS} FROM convention ORDER BY DATEE", (), CONVENTION_HEADERS
        )

    def delete(self, number: int) -> int:
        """Delete a convention and return the number of rows removed."""
        return self.db.execute("DELETE FROM convention WHERE NUMCONVENTION = ?", (number,))

    def update(self, convention: Convention) -> int:
        """Overwrite the convention with the same number; return the rows changed."""
        return self.db.execute(
            "UPDATE convention SET NOM2EMEPARTIE = ?, MONTANTAPAYER = ?, DATEE = ?, NOTE = ? "
            "WHERE NUMCONVENTION = ?",
            (
                convention.other_party,
                convention.amount,
                convention.date,
                convention.note,
                convention.number,
            ),
        )

    def search_prefix(self, prefix: str | int) -> Table:
        """Conventions whose number starts with the given text."""
        return self.db.table(
            f"SELECT {_COLUMNS} FROM convention WHERE NUMCONVENTION LIKE ?",
            (f"{prefix}%",),
        )