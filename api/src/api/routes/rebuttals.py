"""Rebuttal endpoints."""

from fastapi import APIRouter, Query

from api.deps import Service
from api.routes.schemas import CamelModel, RebuttalOut

router = APIRouter()


class RebuttalCreateRequest(CamelModel):
    """Payload for a new rebuttal; required fields are checked by the service."""

    target_claim_id: int | None = None
    text: str | None = None
    source: str | None = None


@router.post("", response_model=RebuttalOut)
def create_rebuttal(service: Service, body: RebuttalCreateRequest) -> RebuttalOut:
    """Rebut an existing statement with a new statement and argument."""
    return RebuttalOut.of(service.create_rebuttal(body.target_claim_id, body.text, body.source))


@router.get("", response_model=list[RebuttalOut])
def list_rebuttals(
    service: Service,
    target_claim_id: int = Query(alias="targetClaimId"),
) -> list[RebuttalOut]:
    """List rebuttals of a statement."""
    return [RebuttalOut.of(result) for result in service.list_rebuttals_for_target(target_claim_id)]
