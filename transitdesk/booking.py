"""Booking desk: pick a route step by step, then book, cancel or amend seats."""

from __future__ import annotations

from transitdesk.database import Database
from transitdesk.reservation import Reservation, ReservationRepository, is_valid_email


class BookingError(Exception):
    """Raised when a booking request cannot be carried out."""


class BookingService:
    """Guides a reservation through the routes on offer and stores it."""

    def __init__(self, db: Database) -> None:
        self.db = db
        self.reservations = ReservationRepository(db)

    def _column(self, sql: str, params: tuple = ()) -> list:
        return [row[0] for row in self.db.query(sql, params)]

    def departure_stations(self) -> list[str]:
        """Departure station of every route, in storage order."""
        return self._column("SELECT STATIOND FROM tabtrajet")

    def arrival_stations(self, departure: str) -> list[str]:
        """Arrival stations reachable from the given departure station."""
        return self._column(
            "SELECT STATIONA FROM tabtrajet WHERE STATIOND = ?", (departure,)
        )

    def departure_dates(self, departure: str, arrival: str) -> list[str]:
        """Departure times of the routes between two stations."""
        return self._column(
            "SELECT DATED FROM tabtrajet WHERE STATIOND = ? AND STATIONA = ?",
            (departure, arrival),
        )

    def arrival_dates(self, departure: str, arrival: str, departure_date: str) -> list[str]:
        """Arrival times of the routes leaving at the given time."""
        return self._column(
            "SELECT DATEA FROM tabtrajet WHERE STATIOND = ? AND STATIONA = ? AND DATED = ?",
            (departure, arrival, departure_date),
        )

    def bus_for_route(
        self, departure: str, arrival: str, departure_date: str, arrival_date: str
    ) -> str | None:
        """The bus serving the fully chosen route, or None if there is none."""
        buses = self._column(
            "SELECT BUS FROM tabtrajet WHERE STATIOND = ? AND DATED = ? "
            "AND STATIONA = ? AND DATEA = ?",
            (departure, departure_date, arrival, arrival_date),
        )
        return buses[-1] if buses else None

    def next_reservation_number(self) -> int:
        """The number following the last stored reservation; 1 when there is none."""
        numbers = self._column("SELECT NUMRESERVATION FROM reservation")
        last = int(numbers[-1]) if numbers else 0
        return last + 1

    def book(self, reservation: Reservation) -> int:
        """Store a new reservation and return its number."""
        if not is_valid_email(reservation.email):
            raise BookingError("the e-mail address must be of the form xxx@xxx")
        return self.reservations.add(reservation)

    def cancel(self, number: int) -> int:
        """Delete an existing reservation; return the number of rows removed."""
        if not self.reservations.exists(number):
            raise BookingError(f"reservation {number} does not exist")
        return self.reservations.delete(number)

    def amend(self, reservation: Reservation) -> int:
        """Overwrite an existing reservation; return the number of rows changed."""
        if not self.reservations.exists(reservation.number):
            raise BookingError(f"reservation {reservation.number} does not exist")
        if not is_valid_email(reservation.email):
            raise BookingError("the e-mail address must be of the form xxx@xxx")
        return self.reservations.update(reservation)