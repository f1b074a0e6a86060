"""Command line front end: manage promotions and print reservation reports."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from datetime import date

from transitdesk.database import Database, DatabaseError, Table
from transitdesk.promotion import Promotion, PromotionRepository
from transitdesk.report import save_report
from transitdesk.reservation import ReservationRepository

DEFAULT_DATABASE = "transitdesk.db"


class _CommandError(Exception):
    """A request that cannot be carried out."""


def _print_table(table: Table) -> None:
    print("\t".join(str(header) for header in table.headers))
    for row in table:
        print("\t".join("" if value is None else str(value) for value in row))


def _promotion_add(db: Database, args: argparse.Namespace) -> int:
    if args.id == "":
        raise _CommandError("empty field: the promotion id is required")
    repo = PromotionRepository(db)
    if repo.get(args.id) is not None:
        raise _CommandError(f"promotion {args.id} already exists")
    repo.add(Promotion(args.id, args.name, args.start, args.end, args.content))
    print("promotion added")
    return 0


def _promotion_delete(db: Database, args: argparse.Namespace) -> int:
    if PromotionRepository(db).delete(args.id) == 0:
        raise _CommandError(f"promotion {args.id} not deleted: it does not exist")
    print("promotion deleted")
    return 0


def _promotion_update(db: Database, args: argparse.Namespace) -> int:
    repo = PromotionRepository(db)
    current = repo.get(args.id)
    if current is None:
        raise _CommandError(f"promotion {args.id} not modified: it does not exist")
    changes = {
        field: value
        for field, value in (
            ("name", args.name),
            ("start_date", args.start),
            ("end_date", args.end),
            ("content", args.content),
        )
        if value is not None
    }
    repo.update(dataclasses.replace(current, **changes))
    print("promotion modified")
    return 0


def _promotion_show(db: Database, args: argparse.Namespace) -> int:
    promotion = PromotionRepository(db).get(args.id)
    if promotion is None:
        raise _CommandError(f"promotion {args.id} does not exist")
    for label, value in (
        ("id", promotion.id),
        ("nom", promotion.name),
        ("datedebut", promotion.start_date),
        ("datefin", promotion.end_date),
        ("contenu", promotion.content),
    ):
        print(f"{label}: {value}")
    return 0


def _promotion_list(db: Database, args: argparse.Namespace) -> int:
    repo = PromotionRepository(db)
    descending = args.order == "desc"
    if args.search is not None:
        table = repo.search(args.search, descending)
    elif args.prefix is not None:
        table = repo.search_prefix(args.prefix)
    elif args.order is not None:
        table = repo.sorted_by_id(descending)
    else:
        table = repo.list()
    _print_table(table)
    return 0


def _report(db: Database, args: argparse.Namespace) -> int:
    table = ReservationRepository(db).list()
    heading = args.heading
    if heading is None:
        heading = f"******LISTE DES Réservations ****** {date.today():%Y/%m/%d}"
    path = save_report(table, args.path, heading)
    print(f"report written to {path}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="transitdesk", description=__doc__)
    parser.add_argument("--db", default=DEFAULT_DATABASE, help="database file")
    commands = parser.add_subparsers(dest="command", required=True)

    promotion = commands.add_parser("promotion", help="manage promotions")
    actions = promotion.add_subparsers(dest="action", required=True)

    add = actions.add_parser("add", help="add a promotion")
    add.add_argument("id")
    add.add_argument("name")
    add.add_argument("start")
    add.add_argument("end")
    add.add_argument("content")
    add.set_defaults(handler=_promotion_add)

    delete = actions.add_parser("delete", help="delete a promotion")
    delete.add_argument("id")
    delete.set_defaults(handler=_promotion_delete)

    update = actions.add_parser("update", help="modify a promotion")
    update.add_argument("id")
    update.add_argument("--name")
    update.add_argument("--start")
    update.add_argument("--end")
    update.add_argument("--content")
    update.set_defaults(handler=_promotion_update)

    show = actions.add_parser("show", help="show one promotion")
    show.add_argument("id")
    show.set_defaults(handler=_promotion_show)

    listing = actions.add_parser("list", help="list promotions")
    listing.add_argument("--order", choices=("asc", "desc"))
    group = listing.add_mutually_exclusive_group()
    group.add_argument("--search", help="ids containing this text")
    group.add_argument("--prefix", help="ids starting with this text")
    listing.set_defaults(handler=_promotion_list)

    report = commands.add_parser("report", help="write the reservation report")
    report.add_argument("path")
    report.add_argument("--heading")
    report.set_defaults(handler=_report)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one command against the database and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        with Database(args.db) as db:
            db.create_schema()
            return args.handler(db, args)
    except (DatabaseError, _CommandError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())