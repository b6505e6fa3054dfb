"""
Argumentation service.

Resolves topics, arguments and claims against the stores and creates
rebuttals. Every traversal is a single hop through the flat relations
(topic -> root claim, argument -> premises, claim -> rebuttals,
claim -> owning argument); nothing materializes the whole tree.

The service is stateless apart from the `Session` it is handed, so one
instance per request is the intended usage.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from argumentation_core.db.models import SOURCE_NAME_MAX, STATEMENT_TEXT_MAX, Statement
from argumentation_core.db.session import unit_of_work
from argumentation_core.db.stores import (
    ArgumentStore,
    PremiseStore,
    SourceStore,
    StatementStore,
    TopicStore,
    clean_statement_text,
)
from argumentation_core.errors import NotFound, ValidationFailure
from argumentation_core.logger import get_logger
from argumentation_core.settings import settings

log = get_logger(__name__)


@dataclass(frozen=True)
class RebuttalResult:
    argument_id: int | None
    statement_id: int
    text: str
    source_name: str | None


@dataclass(frozen=True)
class StatementView:
    id: int
    text: str
    source_name: str | None

    @classmethod
    def of(cls, statement: Statement) -> "StatementView":
        return cls(id=statement.id, text=statement.text, source_name=statement.source_name)


@dataclass(frozen=True)
class TopicView:
    name: str


class ArgumentationService:
    def __init__(
        self,
        session: Session,
        *,
        default_source_name: str | None = None,
        max_text_length: int | None = None,
    ) -> None:
        self._session = session
        self.sources = SourceStore(session)
        self.statements = StatementStore(session)
        self.arguments = ArgumentStore(session)
        self.premises = PremiseStore(session)
        self.topics = TopicStore(session)
        self._default_source_name = default_source_name or settings.default_source_name
        self._max_text_length = min(max_text_length or settings.max_statement_length, STATEMENT_TEXT_MAX)

    def create_rebuttal(
        self,
        target_claim_id: int | None,
        text: str | None,
        source_name: str | None = None,
    ) -> RebuttalResult:
        """
        Author a rebuttal of an existing statement.

        Source upsert, statement insert and argument insert commit together or
        not at all. Input is validated before the database is touched.
        """
        if target_claim_id is None:
            raise ValidationFailure("targetClaimId", "is required")
        cleaned = clean_statement_text(text, max_length=self._max_text_length)
        effective_source = source_name if source_name and source_name.strip() else self._default_source_name
        if len(effective_source) > SOURCE_NAME_MAX:
            raise ValidationFailure("source", f"must be at most {SOURCE_NAME_MAX} characters")

        try:
            with unit_of_work(self._session):
                target = self.statements.get_by_id(target_claim_id)
                if target is None:
                    raise NotFound("statement", target_claim_id)

                source = self.sources.get_or_create(effective_source)
                statement = self.statements.create(cleaned, counter_statement=target, source=source)
                argument = self.arguments.create(statement.id, source.name)
                result = RebuttalResult(
                    argument_id=argument.id,
                    statement_id=statement.id,
                    text=statement.text,
                    source_name=source.name,
                )
        except NotFound:
            log.info("Rebuttal target %s does not exist", target_claim_id)
            raise
        except Exception:
            log.warning("Rebuttal of statement %s rolled back", target_claim_id, exc_info=True)
            raise

        log.info(
            "Created rebuttal statement %s (argument %s) against %s from %r",
            result.statement_id,
            result.argument_id,
            target_claim_id,
            result.source_name,
        )
        return result

    def list_rebuttals_for_target(self, target_claim_id: int) -> list[RebuttalResult]:
        """Rebuttals of a statement, each paired with its owning argument when one exists."""
        results = []
        for statement in self.statements.find_rebuttals_of(target_claim_id):
            owners = self.arguments.find_by_claim_id(statement.id)
            results.append(
                RebuttalResult(
                    argument_id=owners[0].id if owners else None,
                    statement_id=statement.id,
                    text=statement.text,
                    source_name=statement.source_name,
                )
            )
        return results

    def get_root_claim_by_topic_name(self, name: str) -> StatementView:
        topic = self.topics.find_by_name(name)
        if topic is None:
            raise NotFound("topic", name)
        return StatementView.of(topic.argument.claim)

    def get_justifications(self, argument_id: int) -> list[StatementView]:
        if self.arguments.get_by_id(argument_id) is None:
            raise NotFound("argument", argument_id)
        return [StatementView.of(statement) for statement in self.premises.find_by_argument_id(argument_id)]

    def get_argument_id_by_claim_id(self, claim_id: int) -> int:
        # Several arguments may share a claim; the lowest id wins.
        argument = self.arguments.find_first_by_claim_id(claim_id)
        if argument is None:
            raise NotFound("argument for claim", claim_id)
        return argument.id

    def list_topics(self) -> list[TopicView]:
        return [TopicView(name=topic.name) for topic in self.topics.list_all()]
