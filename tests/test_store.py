import threading

import pytest
import sqlalchemy

from armpose.api import deps
from armpose.config import StoreConfig
from armpose.core import PoseStore

real_create_engine = sqlalchemy.create_engine


@pytest.fixture
def captured_engine_kwargs(monkeypatch):
    seen = {}

    def fake_create_engine(url, **kwargs):
        seen["url"] = url
        seen.update(kwargs)
        return real_create_engine("sqlite://")

    monkeypatch.setattr("armpose.core.store.create_engine", fake_create_engine)
    return seen


def test_mysql_timeouts(captured_engine_kwargs):
    PoseStore(StoreConfig(timeout=2.5))
    assert captured_engine_kwargs["connect_args"] == {"connect_timeout": 2.5, "read_timeout": 2.5}


def test_sqlite_timeout(captured_engine_kwargs):
    PoseStore(StoreConfig(url="sqlite:///poses.db", timeout=1.5))
    assert captured_engine_kwargs["connect_args"] == {"timeout": 1.5}


def test_postgres_timeout_rounded_to_whole_seconds(captured_engine_kwargs):
    PoseStore(StoreConfig(url="postgresql://arm@db/lab", timeout=0.4))
    assert captured_engine_kwargs["connect_args"] == {"connect_timeout": 1}


def test_get_store_builds_once_under_concurrency(monkeypatch, tmp_path):
    monkeypatch.setenv("ARMPOSE_DB_URL", f"sqlite:///{tmp_path}/poses.db")
    deps.set_store(None)
    results = []
    start = threading.Barrier(8)

    def worker():
        start.wait()
        results.append(deps.get_store())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(results) == 8
    assert all(s is results[0] for s in results)
    results[0].dispose()
