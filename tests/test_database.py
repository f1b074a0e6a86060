import pytest

from transitdesk.database import Database, DatabaseError, Table


@pytest.fixture
def db():
    with Database() as database:
        database.create_schema()
        yield database


def test_schema_creates_all_tables(db):
    names = {row[0] for row in db.query("SELECT name FROM sqlite_master WHERE type='table'")}
    assert {"bus", "employe", "tabtrajet", "convention", "reservation", "promotion"} <= names


def test_create_schema_is_idempotent(db):
    db.create_schema()
    db.execute("INSERT INTO promotion (ID, NOM) VALUES (?, ?)", ("p1", "summer"))
    db.create_schema()
    assert db.query("SELECT ID, NOM FROM promotion") == [("p1", "summer")]


def test_query_before_open_raises():
    database = Database()
    with pytest.raises(DatabaseError):
        database.query("SELECT 1")


def test_context_manager_closes():
    database = Database()
    with database as opened:
        assert opened.is_open
    assert not database.is_open
    with pytest.raises(DatabaseError):
        database.execute("SELECT 1")


def test_open_missing_directory_raises(tmp_path):
    database = Database(tmp_path / "missing" / "data.db")
    with pytest.raises(DatabaseError):
        database.open()


def test_data_persists_in_file(tmp_path):
    path = tmp_path / "data.db"
    with Database(path) as database:
        database.create_schema()
        database.execute("INSERT INTO promotion (ID, NOM) VALUES (?, ?)", ("p9", "winter"))
    with Database(path) as database:
        assert database.query("SELECT NOM FROM promotion WHERE ID = ?", ("p9",)) == [("winter",)]


def test_execute_returns_rowcount(db):
    db.execute("INSERT INTO promotion (ID, NOM) VALUES (?, ?)", ("a", "x"))
    db.execute("INSERT INTO promotion (ID, NOM) VALUES (?, ?)", ("b", "x"))
    assert db.execute("UPDATE promotion SET NOM = ?", ("y",)) == 2


def test_execute_error_raises_and_keeps_data(db):
    db.execute("INSERT INTO promotion (ID, NOM) VALUES (?, ?)", ("a", "x"))
    with pytest.raises(DatabaseError):
        db.execute("INSERT INTO promotion (ID, NOM) VALUES (?, ?)", ("a", "dup"))
    assert db.query("SELECT NOM FROM promotion") == [("x",)]


def test_bad_sql_raises(db):
    with pytest.raises(DatabaseError):
        db.query("SELECT * FROM nowhere")


def test_table_headers_override_and_extras_ignored(db):
    db.execute("INSERT INTO promotion (ID, NOM, CONTENU) VALUES (?, ?, ?)", ("a", "n", "c"))
    table = db.table("SELECT ID, NOM, CONTENU FROM promotion", (), ["id", "nom", "contenu", "extra"])
    assert table.headers == ("id", "nom", "contenu")
    assert table.rows == (("a", "n", "c"),)


def test_table_partial_headers_keep_column_names(db):
    table = db.table("SELECT ID, NOM FROM promotion", (), ["id"])
    assert table.headers == ("id", "NOM")
    assert len(table) == 0


def test_table_column():
    table = Table(("a", "b"), ((1, 2), (3, 4)))
    assert table.column("b") == [2, 4]
    assert list(table) == [(1, 2), (3, 4)]
    with pytest.raises(KeyError):
        table.column("c")