from __future__ import annotations

from pathlib import Path

import typer
import uvicorn
from rich.console import Console
from rich.table import Table
from sqlalchemy.orm import Session, sessionmaker

from argumentation_core.db.base import Base
from argumentation_core.db.session import make_engine, make_session_factory
from argumentation_core.errors import ArgumentationError
from argumentation_core.logger import configure_logging
from argumentation_core.seed import load_seed_file
from argumentation_core.service import ArgumentationService
from argumentation_core.settings import settings

app = typer.Typer(help="Argumentation admin (schema, seeding, rebuttals).")
console = Console()

_DB_OPTION = typer.Option(None, "--database-url", help="Override ARGUMENTATION_DATABASE_URL.")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging.")) -> None:
    configure_logging("DEBUG" if verbose else settings.log_level, json_output=settings.log_json)


def _session_factory(database_url: str | None) -> sessionmaker[Session]:
    return make_session_factory(make_engine(database_url or settings.database_url, echo=settings.sql_echo))


@app.command("init-db")
def init_db(database_url: str | None = _DB_OPTION) -> None:
    """
    Create all tables on the configured database.

    Development aid; use `alembic upgrade head` for managed databases.
    """
    engine = make_engine(database_url or settings.database_url)
    Base.metadata.create_all(engine)
    typer.echo(f"schema ready: {engine.url.render_as_string(hide_password=True)}")


@app.command()
def seed(path: Path, database_url: str | None = _DB_OPTION) -> None:
    """Load sources, statements, arguments, premises and topics from a JSON file."""
    with _session_factory(database_url)() as session:
        counts = load_seed_file(session, path)
    typer.echo(
        f"seeded: {counts.sources} sources, {counts.statements} statements, "
        f"{counts.arguments} arguments, {counts.premises} premises, {counts.topics} topics"
    )


@app.command()
def rebut(
    claim_id: int,
    text: str,
    *,
    source: str | None = typer.Option(None, help="Source name (defaults to the configured default source)."),
    database_url: str | None = _DB_OPTION,
) -> None:
    """Create a rebuttal of statement CLAIM_ID."""
    with _session_factory(database_url)() as session:
        try:
            result = ArgumentationService(session).create_rebuttal(claim_id, text, source)
        except ArgumentationError as exc:
            typer.echo(f"error: {exc}", err=True)
            raise typer.Exit(code=1) from exc
    typer.echo(f"argument={result.argument_id} statement={result.statement_id} source={result.source_name}")


@app.command()
def topics(database_url: str | None = _DB_OPTION) -> None:
    """List topic names with their root claims."""
    table = Table(title="Topics")
    table.add_column("Topic")
    table.add_column("Claim", justify="right")
    table.add_column("Text")

    with _session_factory(database_url)() as session:
        service = ArgumentationService(session)
        for topic in service.list_topics():
            claim = service.get_root_claim_by_topic_name(topic.name)
            table.add_row(topic.name, str(claim.id), claim.text)

    console.print(table)


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)."),
    port: int | None = typer.Option(None, help="Bind port (default: API_PORT)."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the HTTP API."""
    from api.config import settings as api_settings

    uvicorn.run(
        "api.main:app",
        host=host or api_settings.host,
        port=port or api_settings.port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
