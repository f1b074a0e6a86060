import pytest

from transitdesk.bus import Bus, BusRepository
from transitdesk.database import Database, DatabaseError
from transitdesk.route import ROUTE_HEADERS, Route, RouteRepository


@pytest.fixture
def db():
    database = Database()
    database.open()
    database.create_schema()
    yield database
    database.close()


@pytest.fixture
def repo(db):
    return RouteRepository(db)


def _route(num, arrival="Tunis", bus="1"):
    return Route(num, bus, "Sousse", "2021-05-01 08:00", arrival, "2021-05-01 10:00")


def test_add_and_list_round_trip(repo):
    route = _route(7)
    repo.add(route)
    table = repo.list()
    assert table.rows == (route._values(),)


def test_list_headers_follow_source(repo):
    assert repo.list().headers == ("num", "IDBus", "stationd", "dated", "stationa ", "datea")
    assert repo.list().headers == ROUTE_HEADERS


def test_list_is_ordered_by_arrival_station(repo):
    for num, arrival in [(1, "Tunis"), (2, "Bizerte"), (3, "Monastir")]:
        repo.add(_route(num, arrival))
    arrivals = repo.list().column("stationa ")
    assert arrivals == sorted(arrivals)
    assert len(arrivals) == 3


def test_duplicate_number_raises(repo):
    repo.add(_route(4))
    with pytest.raises(DatabaseError):
        repo.add(_route(4, "Bizerte"))


def test_search_prefix_matches_leading_digits(repo):
    for num in (12, 125, 31):
        repo.add(_route(num))
    assert sorted(repo.search_prefix("12").column("num")) == [12, 125]
    assert len(repo.search_prefix("")) == 3
    assert len(repo.search_prefix("9")) == 0


def test_find_exact_matches_whole_number(repo):
    for num in (12, 125):
        repo.add(_route(num))
    assert repo.find_exact("12").column("num") == [12]
    assert repo.find_exact(125).column("num") == [125]
    assert len(repo.find_exact("1")) == 0


def test_delete_removes_route(repo):
    repo.add(_route(5))
    assert repo.delete(5) == 1
    assert repo.delete(5) == 0
    assert len(repo.list()) == 0


def test_update_overwrites_fields(repo):
    repo.add(_route(6))
    changed = Route(6, "2", "Gabes", "2021-06-01 07:00", "Sfax", "2021-06-01 09:30")
    assert repo.update(changed) == 1
    assert repo.find_exact(6).rows == (changed._values(),)


def test_update_missing_route_changes_nothing(repo):
    assert repo.update(_route(99)) == 0
    assert len(repo.list()) == 0


def test_bus_ids_lists_fleet(db, repo):
    buses = BusRepository(db)
    buses.add(Bus(3, "TEST-0003"))
    buses.add(Bus(1, "TEST-0001"))
    assert sorted(repo.bus_ids()) == [1, 3]


def test_bus_ids_empty_without_buses(repo):
    assert repo.bus_ids() == []


def test_closed_database_raises(db):
    repo = RouteRepository(db)
    db.close()
    with pytest.raises(DatabaseError):
        repo.list()