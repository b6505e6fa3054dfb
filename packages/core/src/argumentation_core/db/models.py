from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from argumentation_core.db.base import Base

STATEMENT_TEXT_MAX = 1024
SOURCE_NAME_MAX = 512


class Source(Base):
    __tablename__ = "sources"

    # Natural key: sources are addressed and upserted by name only.
    name: Mapped[str] = mapped_column(String(SOURCE_NAME_MAX), primary_key=True)
    text: Mapped[str | None] = mapped_column(Text, nullable=True)
    url: Mapped[str | None] = mapped_column(Text, nullable=True)


class Statement(Base):
    __tablename__ = "statements"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(String(STATEMENT_TEXT_MAX), nullable=False)
    # Set on rebuttals only; points at the statement being opposed.
    counter_statement_id: Mapped[int | None] = mapped_column(
        "counter_statement", Integer, ForeignKey("statements.id"), nullable=True, index=True
    )
    source_name: Mapped[str | None] = mapped_column(
        "source", String(SOURCE_NAME_MAX), ForeignKey("sources.name"), nullable=True
    )

    counter_statement: Mapped["Statement | None"] = relationship(remote_side="Statement.id")
    source: Mapped[Source | None] = relationship()


class Argument(Base):
    __tablename__ = "arguments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    claim_id: Mapped[int] = mapped_column(
        "claim", Integer, ForeignKey("statements.id"), nullable=False, index=True
    )
    source_name: Mapped[str | None] = mapped_column(
        "source", String(SOURCE_NAME_MAX), ForeignKey("sources.name"), nullable=True
    )

    claim: Mapped[Statement] = relationship()
    source: Mapped[Source | None] = relationship()


class Premise(Base):
    """Statement `premise` justifies argument `argument`."""

    __tablename__ = "premises"

    argument_id: Mapped[int] = mapped_column("argument", Integer, ForeignKey("arguments.id"), primary_key=True)
    premise_id: Mapped[int] = mapped_column(
        "premise", Integer, ForeignKey("statements.id"), primary_key=True, index=True
    )

    argument: Mapped[Argument] = relationship()
    premise: Mapped[Statement] = relationship()


class Topic(Base):
    __tablename__ = "topics"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(512), nullable=False, unique=True)
    argument_id: Mapped[int] = mapped_column("argument", Integer, ForeignKey("arguments.id"), nullable=False)

    argument: Mapped[Argument] = relationship()
