"""Seat reservations on a route, paid for and tied to a customer's e-mail."""

from __future__ import annotations

from dataclasses import dataclass

from transitdesk.database import Database, Table

RESERVATION_HEADERS = (
    "Num Réservation",
    "Nombre De Place",
    "Prix",
    "TrajetD",
    "DateD",
    "Adresse Email",
    "TrajetA",
    "DateA",
)

_SQL_COLUMNS = (
    "NUMRESERVATION",
    "NOMBREDEPLACE",
    "PRIX",
    "TRAJETD",
    "DATED",
    "ADRESSEEMAIL",
    "TRAJETA",
    "DATEA",
)

_COLUMNS = ", ".join(_SQL_COLUMNS)


def is_valid_email(address: str) -> bool:
    """Accept an address as soon as it holds an '@'."""
    return "@" in address


@dataclass(frozen=True)
class Reservation:
    """One reservation; the number is assigned by the store when it is added."""

    number: int = 0
    seats: int = 0
    price: float = 0.0
    departure: str = ""
    departure_date: str = ""
    arrival: str = ""
    arrival_date: str = ""
    email: str = ""

    @classmethod
    def _from_row(cls, row: tuple) -> Reservation:
        number, seats, price, departure, departure_date, email, arrival, arrival_date = row
        return cls(
            number=number,
            seats=seats,
            price=price,
            departure=departure,
            departure_date=departure_date,
            arrival=arrival,
            arrival_date=arrival_date,
            email=email,
        )


class ReservationRepository:
    """Stores reservations in the reservation table."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def add(self, reservation: Reservation) -> int:
        """Insert a reservation under a fresh number and return that number."""
        self.db.execute(
            "INSERT INTO reservation "
            "(NOMBREDEPLACE, PRIX, TRAJETD, DATED, ADRESSEEMAIL, TRAJETA, DATEA) "
            "VALUES (?, ?, ?, ?, ?, ?, ?)",
            (
                reservation.seats,
                reservation.price,
                reservation.departure,
                reservation.departure_date,
                reservation.email,
                reservation.arrival,
                reservation.arrival_date,
            ),
        )
        return self.db.query("SELECT MAX(NUMRESERVATION) FROM reservation")[0][0]

    def list(self) -> Table:
        """All reservations in storage order."""
        return self.db.table(f"SELECT {_COLUMNS} FROM reservation", (), RESERVATION_HEADERS)

    def get(self, number: int) -> Reservation | None:
        """The reservation with this number, or None."""
        rows = self.db.query(
            f"SELECT {_COLUMNS} FROM reservation WHERE NUMRESERVATION = ?", (number,)
        )
        if not rows:
            return None
        return Reservation._from_row(rows[-1])

    def exists(self, number: int) -> bool:
        rows = self.db.query(
            "SELECT 1 FROM reservation WHERE NUMRESERVATION = ?", (number,)
        )
        return bool(rows)

    def delete(self, number: int) -> int:
        """Delete a reservation and return the number of rows removed."""
        return self.db.execute("DELETE FROM reservation WHERE NUMRESERVATION = ?", (number,))

    def update(self, reservation: Reservation) -> int:
        """Overwrite the reservation with the same number; return the rows changed."""
        return self.db.execute(
            "UPDATE reservation SET NOMBREDEPLACE = ?, PRIX = ?, TRAJETD = ?, DATED = ?, "
            "TRAJETA = ?, DATEA = ?, ADRESSEEMAIL = ? WHERE NUMRESERVATION = ?",
            (
                reservation.seats,
                reservation.price,
                reservation.departure,
                reservation.departure_date,
                reservation.arrival,
                reservation.arrival_date,
                reservation.email,
                reservation.number,
            ),
        )

    def search_prefix(self, prefix: str | int) -> Table:
        """Reservations whose number starts with the given text."""
        return self.db.table(
            f"SELECT {_COLUMNS} FROM reservation WHERE NUMRESERVATION LIKE ?",
            (f"{prefix}%",),
            RESERVATION_HEADERS,
        )

    def sorted_by(self, column: str | int, descending: bool = False) -> Table:
        """All reservations sorted on one column, given by header or position."""
        if isinstance(column, int):
            if not 0 <= column < len(_SQL_COLUMNS):
                raise IndexError(column)
            sql_column = _SQL_COLUMNS[column]
        else:
            try:
                sql_column = _SQL_COLUMNS[RESERVATION_HEADERS.index(column)]
            except ValueError:
                raise KeyError(column) from None
        direction = "DESC" if descending else "ASC"
        return self.db.table(
            f"SELECT {_COLUMNS} FROM reservation ORDER BY {sql_column} {direction}",
            (),
            RESERVATION_HEADERS,
        )