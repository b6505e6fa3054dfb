"""
Load a debate graph from a JSON document.

Expected shape (every array optional)::

    {
      "sources":    [{"name": "args.me", "text": null, "url": "https://args.me"}],
      "statements": [{"id": 1, "text": "...", "counter_statement": null, "source": "args.me"}],
      "arguments":  [{"id": 1, "claim": 1, "source": "args.me"}],
      "premises":   [{"argument": 1, "premise": 2}],
      "topics":     [{"id": 1, "name": "Television", "argument": 1}]
    }

Ids are kept as given so premise/topic rows can refer to them. Statements are
inserted in document order, so a rebuttal must come after the statement it
counters.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sqlalchemy import text
from sqlalchemy.orm import Session

from argumentation_core.db.models import Argument, Premise, Source, Statement, Topic
from argumentation_core.db.session import unit_of_work
from argumentation_core.db.stores import clean_statement_text
from argumentation_core.logger import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class SeedCounts:
    sources: int
    statements: int
    arguments: int
    premises: int
    topics: int


def load_seed_file(session: Session, path: Path) -> SeedCounts:
    return load_seed(session, json.loads(path.read_text(encoding="utf-8")))


def load_seed(session: Session, doc: dict[str, Any]) -> SeedCounts:
    """Insert every row of `doc` in one transaction."""
    sources = doc.get("sources", [])
    statements = doc.get("statements", [])
    arguments = doc.get("arguments", [])
    premises = doc.get("premises", [])
    topics = doc.get("topics", [])

    with unit_of_work(session):
        for row in sources:
            session.add(Source(name=row["name"], text=row.get("text"), url=row.get("url")))
        session.flush()

        for row in statements:
            session.add(
                Statement(
                    id=row.get("id"),
                    text=clean_statement_text(row["text"]),
                    counter_statement_id=row.get("counter_statement"),
                    source_name=row.get("source"),
                )
            )
            # Flush per row: a later statement may counter an earlier one.
            session.flush()

        for row in arguments:
            session.add(Argument(id=row.get("id"), claim_id=row["claim"], source_name=row.get("source")))
        session.flush()

        for row in premises:
            session.add(Premise(argument_id=row["argument"], premise_id=row["premise"]))
        session.flush()

        for row in topics:
            session.add(Topic(id=row.get("id"), name=row["name"], argument_id=row["argument"]))
        session.flush()

        if session.get_bind().dialect.name == "postgresql":
            _advance_sequences(session)

    counts = SeedCounts(
        sources=len(sources),
        statements=len(statements),
        arguments=len(arguments),
        premises=len(premises),
        topics=len(topics),
    )
    log.info("Seeded %s", counts)
    return counts


def _advance_sequences(session: Session) -> None:
    # Explicit ids bypass the serial sequences; move them past the seeded rows.
    for table in ("statements", "arguments", "topics"):
        session.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"COALESCE((SELECT MAX(id) FROM {table}), 0) + 1, false)"
            )
        )
