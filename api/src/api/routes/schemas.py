"""Wire models shared by the route modules (camelCase on the wire)."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from argumentation_core.service import RebuttalResult, StatementView


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StatementOut(CamelModel):
    """A claim or premise with its source name."""

    id: int
    text: str
    source: str | None

    @classmethod
    def of(cls, view: StatementView) -> "StatementOut":
        return cls(id=view.id, text=view.text, source=view.source_name)


class RebuttalOut(CamelModel):
    """A rebuttal statement and the argument that owns it."""

    argument_id: int | None
    statement_id: int
    text: str
    source: str | None

    @classmethod
    def of(cls, result: RebuttalResult) -> "RebuttalOut":
        return cls(
            argument_id=result.argument_id,
            statement_id=result.statement_id,
            text=result.text,
            source=result.source_name,
        )
