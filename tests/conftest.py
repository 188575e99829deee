import sqlite3

import pytest

from armpose.api.deps import set_store
from armpose.config import StoreConfig
from armpose.core import PoseStore


def make_db(path, rows=()):
    con = sqlite3.connect(path)
    con.execute(
        "CREATE TABLE poses (id INTEGER PRIMARY KEY, created_at TEXT NOT NULL, angle INTEGER)"
    )
    con.executemany("INSERT INTO poses (id, created_at, angle) VALUES (?, ?, ?)", rows)
    con.commit()
    con.close()
    return path


@pytest.fixture
def count_rows():
    def _count(path):
        con = sqlite3.connect(path)
        try:
            return con.execute("SELECT COUNT(*) FROM poses").fetchone()[0]
        finally:
            con.close()

    return _count


@pytest.fixture(autouse=True)
def _reset_store():
    yield
    set_store(None)


@pytest.fixture
def store_for(tmp_path):
    made = []

    def _make(rows=()):
        path = make_db(str(tmp_path / "poses.db"), rows)
        s = PoseStore(StoreConfig(url=f"sqlite:///{path}"))
        made.append(s)
        return s

    yield _make
    for s in made:
        s.dispose()


@pytest.fixture
def unreachable_store(tmp_path):
    s = PoseStore(StoreConfig(url=f"sqlite:///{tmp_path}/no/such/dir/poses.db"))
    yield s
    s.dispose()
