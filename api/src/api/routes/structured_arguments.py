"""Tree-fragment lookups: topic root claims, justifications, claim owners."""

from fastapi import APIRouter, Query

from api.deps import Service
from api.routes.schemas import CamelModel, StatementOut

router = APIRouter()


class ArgumentIdResponse(CamelModel):
    argument_id: int


@router.get("/by-topic-name", response_model=StatementOut)
def get_root_claim_by_topic_name(service: Service, name: str) -> StatementOut:
    """Root claim of the argument a topic points to."""
    return StatementOut.of(service.get_root_claim_by_topic_name(name))


@router.get("/justifications", response_model=list[StatementOut])
def get_justifications(service: Service, argument_id: int = Query(alias="argumentId")) -> list[StatementOut]:
    """Premises supporting an argument."""
    return [StatementOut.of(view) for view in service.get_justifications(argument_id)]


@router.get("/argument-by-claim", response_model=ArgumentIdResponse)
@router.get("/argument-id-by-claim", response_model=ArgumentIdResponse, include_in_schema=False)
def get_argument_id_by_claim(service: Service, claim_id: int = Query(alias="claimId")) -> ArgumentIdResponse:
    """Argument whose claim is the given statement (lowest id when several)."""
    return ArgumentIdResponse(argument_id=service.get_argument_id_by_claim_id(claim_id))
