import pytest

from transitdesk.database import Database, DatabaseError
from transitdesk.employee import EMPLOYEE_HEADERS, Employee, EmployeeRepository


@pytest.fixture
def repo():
    with Database() as db:
        db.create_schema()
        yield EmployeeRepository(db)


def make_employee(employee_id, first_name="Alice", **changes):
    values = dict(
        id=employee_id,
        last_name="Martin",
        first_name=first_name,
        address="Somewhere",
        phone="0",
        cin=f"cin-{employee_id}",
    )
    values.update(changes)
    return Employee(**values)


def test_add_and_find_round_trip(repo):
    employee = make_employee(4)
    repo.add(employee)
    table = repo.find("4")
    assert table.headers == EMPLOYEE_HEADERS
    assert table.rows == (employee._values(),)


def test_find_accepts_int(repo):
    repo.add(make_employee(4))
    assert repo.find(4).column("CIN") == ["cin-4"]


def test_find_missing_is_empty(repo):
    repo.add(make_employee(4))
    assert len(repo.find("9")) == 0


def test_list_ordered_by_first_name(repo):
    repo.add(make_employee(1, "Zoe"))
    repo.add(make_employee(2, "Adam"))
    repo.add(make_employee(3, "Marc"))
    assert repo.list().column("Prenom") == ["Adam", "Marc", "Zoe"]


def test_duplicate_id_raises(repo):
    repo.add(make_employee(1))
    with pytest.raises(DatabaseError):
        repo.add(make_employee(1, "Other"))


def test_update(repo):
    repo.add(make_employee(1))
    changed = make_employee(1, "Bea", address="Elsewhere")
    assert repo.update(changed) == 1
    assert repo.find(1).rows == (changed._values(),)


def test_update_missing_changes_nothing(repo):
    assert repo.update(make_employee(2)) == 0
    assert len(repo.list()) == 0


def test_delete(repo):
    repo.add(make_employee(1))
    repo.add(make_employee(2, "Bob"))
    assert repo.delete(1) == 1
    assert repo.list().column("ID") == [2]