from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, func, select
from sqlalchemy.orm import Session, sessionmaker

from api.main import create_app
from argumentation_core.db import models  # noqa: F401
from argumentation_core.db.base import Base
from argumentation_core.db.session import make_engine, make_session_factory
from argumentation_core.seed import load_seed

# Television topic -> argument 1 -> claim 1, justified by statements 2 and 3.
# Statement 4 rebuts 1 through argument 2 (no premises). Statement 5 is a
# legacy rebuttal of 1 with no owning argument. Argument 3 duplicates claim 1.
SAMPLE_GRAPH: dict[str, Any] = {
    "sources": [
        {"name": "args.me", "text": "args.me corpus", "url": "https://www.args.me"},
    ],
    "statements": [
        {"id": 1, "text": "Television does more harm than good.", "counter_statement": None, "source": "args.me"},
        {"id": 2, "text": "Heavy viewers perform worse at school.", "counter_statement": None, "source": "args.me"},
        {"id": 3, "text": "Television displaces reading.", "counter_statement": None, "source": None},
        {"id": 4, "text": "Educational programming improves literacy.", "counter_statement": 1, "source": "args.me"},
        {"id": 5, "text": "Nobody is forced to watch.", "counter_statement": 1, "source": None},
    ],
    "arguments": [
        {"id": 1, "claim": 1, "source": "args.me"},
        {"id": 2, "claim": 4, "source": "args.me"},
        {"id": 3, "claim": 1, "source": None},
    ],
    "premises": [
        {"argument": 1, "premise": 2},
        {"argument": 1, "premise": 3},
    ],
    "topics": [
        {"id": 1, "name": "Television", "argument": 1},
        {"id": 2, "name": "Nuclear Energy", "argument": 2},
    ],
}


@pytest.fixture()
def database_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'argumentation.db'}"


@pytest.fixture()
def engine(database_url: str) -> Generator[Engine, None, None]:
    engine = make_engine(database_url)
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker[Session]:
    factory = make_session_factory(engine)
    with factory() as session:
        load_seed(session, SAMPLE_GRAPH)
    return factory


@pytest.fixture()
def session(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    with session_factory() as session:
        yield session


@pytest.fixture()
def client(session_factory: sessionmaker[Session]) -> TestClient:
    return TestClient(create_app(session_factory=session_factory))


def count_rows(session_factory: sessionmaker[Session]) -> dict[str, int]:
    """Row counts per table, read through a fresh session."""
    with session_factory() as session:
        return {
            table.name: session.scalar(select(func.count()).select_from(table)) or 0
            for table in Base.metadata.sorted_tables
        }
