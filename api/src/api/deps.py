"""FastAPI dependencies for database access."""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from argumentation_core.service import ArgumentationService


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a database session for request handling."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


DbSession = Annotated[Session, Depends(get_db)]


def get_service(db: DbSession) -> ArgumentationService:
    """One service per request, bound to that request's session."""
    return ArgumentationService(db)


Service = Annotated[ArgumentationService, Depends(get_service)]
