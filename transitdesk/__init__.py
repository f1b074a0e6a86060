"""Back-office records for a bus transport company, kept in SQLite, with HTML reports and a command line."""

__version__ = "0.1.0"
__all__ = [
    "booking",
    "bus",
    "cli",
    "convention",
    "database",
    "employee",
    "promotion",
    "report",
    "reservation",
    "route",
]