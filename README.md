# transitdesk

Back-office records for a small bus transport company, stored in a local
SQLite database. The package keeps track of:

- **buses** (`transitdesk.bus`): `Bus` and `BusRepository`, with plate,
  brand, state, capacity, driver and availability;
- **employees** (`transitdesk.employee`): `Employee` and `EmployeeRepository`;
- **routes** (`transitdesk.route`): `Route` and `RouteRepository`, with
  departure and arrival stations and times and the bus that serves them;
- **conventions** (`transitdesk.convention`): `Convention` and
  `ConventionRepository`, agreements with a second party and the amount due;
- **reservations** (`transitdesk.reservation`): `Reservation`,
  `ReservationRepository` and `is_valid_email`;
- the **booking** workflow built on top of them (`transitdesk.booking`):
  `BookingService` and `BookingError`;
- **promotions** (`transitdesk.promotion`): `Promotion` and
  `PromotionRepository`;
- HTML **reports** of any listing (`transitdesk.report`): `render_html` and
  `save_report`.

## Installation

```
pip install .
```

Python 3.10 or later is required. There are no third-party dependencies.

## Command line

Installing the package provides the `transitdesk` command. It opens the
database given by `--db` (default `transitdesk.db`), creates any missing
tables, runs one command and exits with status 0, or prints `error: ...` to
standard error and exits with status 1.

```
transitdesk --help
```

Promotions:

```
transitdesk promotion add ID NAME START END CONTENT
transitdesk promotion update ID [--name N] [--start S] [--end E] [--content C]
transitdesk promotion delete ID
transitdesk promotion show ID
transitdesk promotion list [--order asc|desc] [--search TEXT | --prefix TEXT]
```

- `add` refuses an empty id and an id that is already stored.
- `update` changes only the fields given; the promotion must exist.
- `delete` fails when no promotion has that id.
- `list` prints a tab-separated table: `--search` keeps ids containing the
  text (ordered by id, ascending unless `--order desc`), `--prefix` keeps ids
  starting with it, `--order` alone sorts every promotion by id.

Reservation report:

```
transitdesk report reservations.html [--heading TEXT]
```

writes an HTML report of every reservation. Without `--heading`, the heading
carries today's date.

## Using the library

Every record kind has a repository that works against a `Database`:

```python
from transitdesk.database import Database
from transitdesk.bus import Bus, BusRepository
from transitdesk.reservation import Reservation, ReservationRepository, is_valid_email
from transitdesk.booking import BookingService
from transitdesk.report import save_report

with Database("transit.db") as db:
    db.create_schema()

    buses = BusRepository(db)
    buses.add(Bus(1, "TEST-0001", "Brand", "new", 50, "Driver", "yes"))
    print(buses.find(1))

    booking = BookingService(db)
    number = booking.book(Reservation(seats=2, price=12.5, email="rider@example.com"))
    print(number, booking.next_reservation_number())

    save_report(ReservationRepository(db).list(), "reservations.html", "Reservations")

print(is_valid_email("rider@example.com"))   # True: it holds an '@'
```

`Database()` with no path works in memory. `Database.execute` commits and
returns the number of rows affected; `Database.query` returns rows and
`Database.table` returns a `Table`.

Listings are returned as `Table` objects, which carry the column headers and
the rows; `Table.column(name)` gives the values of one column and raises
`KeyError` for an unknown header.

`BookingService` also offers the step-by-step choice of a route:
`departure_stations()`, `arrival_stations(departure)`,
`departure_dates(departure, arrival)`,
`arrival_dates(departure, arrival, departure_date)` and
`bus_for_route(...)`. `cancel` and `amend` work only on existing reservations.

`render_html(table, heading, hidden_columns)` returns the report as a string;
hidden columns are given by position or header.

Failures reported by the database, such as a duplicate id, are raised as
`DatabaseError`; booking rules that are broken (an unknown reservation
number, an e-mail address without an `@`) raise `BookingError`.

## What it does not do

- There is no graphical interface; everything is done through the library or
  the `transitdesk` command.
- The command covers promotions and the reservation report only. Buses,
  employees, routes, conventions and reservations are managed through their
  repositories in Python code.
- Reports are written as HTML files; nothing is sent to a printer.

## Running the tests

```
pip install ".[test]"
pytest
```