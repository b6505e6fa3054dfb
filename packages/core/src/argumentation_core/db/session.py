from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from argumentation_core.settings import settings


def make_engine(database_url: str, *, echo: bool = False) -> Engine:
    if database_url.startswith("sqlite"):
        engine = create_engine(database_url, echo=echo, connect_args={"check_same_thread": False})
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_engine(database_url, echo=echo, pool_pre_ping=True)


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    # SQLite ships with FK enforcement off per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@lru_cache(maxsize=1)
def default_session_factory() -> sessionmaker[Session]:
    return make_session_factory(make_engine(settings.database_url, echo=settings.sql_echo))


def db_session() -> Session:
    return default_session_factory()()


@contextmanager
def unit_of_work(session: Session) -> Iterator[Session]:
    """
    Commit everything done inside the block, or roll all of it back.

    Any exception (validation, not-found, storage fault) rolls back and is re-raised.
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
