"""Employees of the company."""

from __future__ import annotations

from dataclasses import dataclass

from transitdesk.database import Database, Table

EMPLOYEE_HEADERS = ("ID", "Nom", "Prenom", "Adresse", "Telephone", "CIN")

_COLUMNS = "ID, NOM, PRENOM, ADRESSE, TELEPHONE, CIN"


@dataclass(frozen=True)
class Employee:
    """One employee record."""

    id: int = 0
    last_name: str = ""
    first_name: str = ""
    address: str = ""
    phone: str = ""
    cin: str = ""

    def _values(self) -> tuple:
        return (self.id, self.last_name, self.first_name, self.address, self.phone, self.cin)


class EmployeeRepository:
    """Stores employees in the employe table."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def add(self, employee: Employee) -> None:
        """Insert an employee; raise DatabaseError if the id is taken."""
        self.db.execute(
            f"INSERT INTO employe ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)", employee._values()
        )

    def update(self, employee: Employee) -> int:
        """Overwrite the employee with the same id; return the rows changed."""
        return self.db.execute(
            "UPDATE employe SET NOM = ?, PRENOM = ?, ADRESSE = ?, TELEPHONE = ?, CIN = ? "
            "WHERE ID = ?",
            (
                employee.last_name,
                employee.first_name,
                employee.address,
                employee.phone,
                employee.cin,
                employee.id,
            ),
        )

    def list(self) -> Table:
        """All employees, ordered by first name."""
        return self.db.table(
            f"SELECT {_COLUMNS} FROM employe ORDER BY PRENOM ASC", (), EMPLOYEE_HEADERS
        )

    def find(self, value: str | int) -> Table:
        """Employees whose id equals the given value."""
        return self.db.table(
            f"SELECT {_COLUMNS} FROM employe WHERE ID = ?", (str(value),), EMPLOYEE_HEADERS
        )

    def delete(self, employee_id: int) -> int:
        """Delete an employee and return the number of rows removed."""
        return self.db.execute("DELETE FROM employe WHERE ID = ?", (employee_id,))