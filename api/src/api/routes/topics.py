"""Topic endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel

from api.deps import Service

router = APIRouter()


class TopicOut(BaseModel):
    topic: str


@router.get("/topics", response_model=list[TopicOut])
def list_topics(service: Service) -> list[TopicOut]:
    """All topic names."""
    return [TopicOut(topic=view.name) for view in service.list_topics()]
