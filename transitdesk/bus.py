"""Buses of the fleet."""

from __future__ import annotations

from dataclasses import dataclass

from transitdesk.database import Database, Table

BUS_HEADERS = ("ID", "Matricule", "Marque", "Etat", "Capacite", "Chauffeur", "Disponibilite")

_COLUMNS = "ID, MATRICULE, MARQUE, ETAT, CAPACITE, CHAUFFEUR, DISPONIBILITE"


@dataclass(frozen=True)
class Bus:
    """One bus record."""

    id: int = 0
    plate: str = ""
    brand: str = ""
    state: str = ""
    capacity: int = 0
    driver: str = ""
    availability: str = ""

    def _values(self) -> tuple:
        return (
            self.id,
            self.plate,
            self.brand,
            self.state,
            self.capacity,
            self.driver,
            self.availability,
        )


class BusRepository:
    """Stores buses in the BUS table."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def add(self, bus: Bus) -> None:
        """Insert a bus; raise DatabaseError if the id is taken."""
        self.db.execute(
            f"INSERT INTO bus ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)", bus._values()
        )

    def list(self) -> Table:
        return self.db.table(f"SELECT {_COLUMNS} FROM bus", (), BUS_HEADERS)

    def delete(self, bus_id: int) -> int:
        """Delete a bus and return the number of rows removed."""
        return self.db.execute("DELETE FROM bus WHERE ID = ?", (bus_id,))

    def find(self, bus_id: int) -> Bus | None:
        rows = self.db.query(f"SELECT {_COLUMNS} FROM bus WHERE ID = ?", (bus_id,))
        if not rows:
            return None
        return Bus(*rows[-1])

    def replace(self, bus: Bus) -> None:
        """Remove any bus with the same id and store this one in its place."""
        self.db.execute(
            f"INSERT OR REPLACE INTO bus ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
            bus._values(),
        )