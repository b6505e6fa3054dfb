"""
Stores over the five debate-graph relations.

Each store wraps a caller-owned `Session` and never commits: transaction
boundaries belong to the service (see `unit_of_work`). Lookups return `None`
for a missing row; turning that into `NotFound` is the caller's decision.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from argumentation_core.db.models import STATEMENT_TEXT_MAX, Argument, Premise, Source, Statement, Topic
from argumentation_core.errors import ValidationFailure

_UPSERT_INSERTS = {"postgresql": pg_insert, "sqlite": sqlite_insert}


def clean_statement_text(text: str | None, *, max_length: int = STATEMENT_TEXT_MAX) -> str:
    """Trim statement text; reject missing, blank or over-long input."""
    if text is None or not text.strip():
        raise ValidationFailure("text", "must not be blank")
    cleaned = text.strip()
    if len(cleaned) > max_length:
        raise ValidationFailure("text", f"must be at most {max_length} characters")
    return cleaned


class SourceStore:
    def __init__(self, session: Session) -> None:
        self._session = session

    def get_or_create(self, name: str) -> Source:
        """
        Return the source called `name`, inserting a bare one (no text, no url) if absent.

        The insert is conditional on the primary key, so two writers racing on
        the same name both end up with the single stored row.
        """
        existing = self._session.get(Source, name)
        if existing is not None:
            return existing

        dialect = self._session.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"source upsert is not available on {dialect!r}")
        self._session.execute(
            insert(Source)
            .values(name=name, text=None, url=None)
            .on_conflict_do_nothing(index_elements=["name"])
        )

        return self._session.get(Source, name)


class StatementStore:
    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, statement_id: int) -> Statement | None:
        return self._session.get(Statement, statement_id)

    def create(
        self,
        text: str,
        *,
        counter_statement: Statement | None = None,
        source: Source | None = None,
    ) -> Statement:
        statement = Statement(
            text=clean_statement_text(text),
            counter_statement=counter_statement,
            source=source,
        )
        self._session.add(statement)
        self._session.flush()
        return statement

    def find_rebuttals_of(self, statement_id: int) -> Sequence[Statement]:
        return self._session.scalars(
            select(Statement).where(Statement.counter_statement_id == statement_id).order_by(Statement.id)
        ).all()


class ArgumentStore:
    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, argument_id: int) -> Argument | None:
        return self._session.get(Argument, argument_id)

    def create(self, claim_statement_id: int, source_name: str | None = None) -> Argument:
        argument = Argument(claim_id=claim_statement_id, source_name=source_name)
        self._session.add(argument)
        self._session.flush()
        return argument

    def find_by_claim_id(self, claim_id: int) -> Sequence[Argument]:
        return self._session.scalars(
            select(Argument).where(Argument.claim_id == claim_id).order_by(Argument.id)
        ).all()

    def find_first_by_claim_id(self, claim_id: int) -> Argument | None:
        """Lowest argument id among those claiming `claim_id`."""
        return self._session.scalars(
            select(Argument).where(Argument.claim_id == claim_id).order_by(Argument.id).limit(1)
        ).first()


class PremiseStore:
    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_argument_id(self, argument_id: int) -> Sequence[Statement]:
        return self._session.scalars(
            select(Statement)
            .join(Premise, Premise.premise_id == Statement.id)
            .where(Premise.argument_id == argument_id)
            .order_by(Statement.id)
        ).all()


class TopicStore:
    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_name(self, name: str) -> Topic | None:
        return self._session.scalars(select(Topic).where(Topic.name == name)).first()

    def list_all(self) -> Sequence[Topic]:
        return self._session.scalars(select(Topic).order_by(Topic.id)).all()
