"""Bus routes between stations, with departure and arrival times."""

from __future__ import annotations

from dataclasses import dataclass

from transitdesk.database import Database, Table

ROUTE_HEADERS = ("num", "IDBus", "stationd", "dated", "stationa ", "datea")

_COLUMNS = "NUM, BUS, STATIOND, DATED, STATIONA, DATEA"


@dataclass(frozen=True)
class Route:
    """One route: the bus that serves it, where and when it leaves and arrives."""

    num: int = 0
    bus: str = ""
    departure_station: str = ""
    departure_date: str = ""
    arrival_station: str = ""
    arrival_date: str = ""

    def _values(self) -> tuple:
        return (
            self.num,
            self.bus,
            self.departure_station,
            self.departure_date,
            self.arrival_station,
            self.arrival_date,
        )


class RouteRepository:
    """Stores routes in the tabtrajet table."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def add(self, route: Route) -> None:
        """Insert a route; raise DatabaseError if the number is taken."""
        self.db.execute(
            f"INSERT INTO tabtrajet ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)", route._values()
        )

    def list(self) -> Table:
        """All routes, ordered by arrival station."""
        return self.db.table(
            f"SELECT {_COLUMNS} FROM tabtrajet ORDER BY STATIONA", (), ROUTE_HEADERS
        )

    def search_prefix(self, prefix: str | int) -> Table:
        """Routes whose number starts with the given text."""
        return self.db.table(
            f"SELECT {_COLUMNS} FROM tabtrajet WHERE NUM LIKE ?",
            (f"{prefix}%",),
            ROUTE_HEADERS,
        )

    def find_exact(self, num: str | int) -> Table:
        """Routes whose number matches the given text as a whole."""
        return self.db.table(
            f"SELECT {_COLUMNS} FROM tabtrajet WHERE NUM LIKE ?",
            (str(num),),
            ROUTE_HEADERS,
        )

    def delete(self, num: int) -> int:
        """Delete a route and return the number of rows removed."""
        return self.db.execute("DELETE FROM tabtrajet WHERE NUM = ?", (num,))

    def update(self, route: Route) -> int:
        """Overwrite the route with the same number; return the rows changed."""
        return self.db.execute(
            "UPDATE tabtrajet SET BUS = ?, STATIOND = ?, DATED = ?, STATIONA = ?, DATEA = ? "
            "WHERE NUM = ?",
            (
                route.bus,
                route.departure_station,
                route.departure_date,
                route.arrival_station,
                route.arrival_date,
                route.num,
            ),
        )

    def bus_ids(self) -> list[int]:
        """Identifiers of every bus a route can be assigned to."""
        return [row[0] for row in self.db.query("SELECT ID FROM bus")]