"""Promotions offered to customers over a period of time."""

from __future__ import annotations

from dataclasses import dataclass

from transitdesk.database import Database, Table

PROMOTION_HEADERS = ("id", "nom", "datedebut", "datefin", "contenu")

_COLUMNS = "ID, NOM, DATEDEBUT, DATEFIN, CONTENU"


@dataclass(frozen=True)
class Promotion:
    """One promotion record."""

    id: str = ""
    name: str = ""
    start_date: str = ""
    end_date: str = ""
    content: str = ""

    def _values(self) -> tuple:
        return (self.id, self.name, self.start_date, self.end_date, self.content)


class PromotionRepository:
    """Stores promotions in the promotion table."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def add(self, promotion: Promotion) -> None:
        """Insert a promotion; raise DatabaseError if the id is taken."""
        self.db.execute(
            f"INSERT INTO promotion ({_COLUMNS}) VALUES (?, ?, ?, ?, ?)", promotion._values()
        )

    def update(self, promotion: Promotion) -> int:
        """Overwrite the promotion with the same id; return the rows changed."""
        return self.db.execute(
            "UPDATE promotion SET NOM = ?, DATEDEBUT = ?, DATEFIN = ?, CONTENU = ? WHERE ID = ?",
            (
                promotion.name,
                promotion.start_date,
                promotion.end_date,
                promotion.content,
                promotion.id,
            ),
        )

    def delete(self, promotion_id: str) -> int:
        """Delete a promotion and return the number of rows removed."""
        return self.db.execute("DELETE FROM promotion WHERE ID = ?", (promotion_id,))

    def list(self) -> Table:
        """All promotions in storage order."""
        return self.db.table(f"SELECT {_COLUMNS} FROM promotion", (), PROMOTION_HEADERS)

    def ids(self) -> list[str]:
        """The id of every promotion."""
        return [row[0] for row in self.db.query("SELECT ID FROM promotion")]

    def get(self, promotion_id: str) -> Promotion | None:
        """The promotion with this id, or None."""
        rows = self.db.query(
            f"SELECT {_COLUMNS} FROM promotion WHERE ID = ?", (promotion_id,)
        )
        if not rows:
            return None
        return Promotion(*rows[-1])

    def sorted_by_id(self, descending: bool = False) -> Table:
        """All promotions ordered by id."""
        direction = "DESC" if descending else "ASC"
        return self.db.table(
            f"SELECT {_COLUMNS} FROM promotion ORDER BY ID {direction}",
            (),
            PROMOTION_HEADERS,
        )

    def search(self, value: str, descending: bool = False) -> Table:
        """Promotions whose id contains the given text, ordered by id."""
        direction = "DESC" if descending else "ASC"
        return self.db.table(
            f"SELECT {_COLUMNS} FROM promotion WHERE ID LIKE ? ORDER BY ID {direction}",
            (f"%{value}%",),
            PROMOTION_HEADERS,
        )

    def search_prefix(self, prefix: str) -> Table:
        """Promotions whose id starts with the given text."""
        return self.db.table(
            f"SELECT {_COLUMNS} FROM promotion WHERE ID LIKE ?",
            (f"{prefix}%",),
            PROMOTION_HEADERS,
        )

    def exists(self, promotion_id: str) -> bool:
        """Whether any promotion id contains the given text."""
        rows = self.db.query(
            "SELECT 1 FROM promotion WHERE ID LIKE ?", (f"%{promotion_id}%",)
        )
        return bool(rows)