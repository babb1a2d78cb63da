"""Cause model for journal domain."""

from pydantic import BaseModel, ConfigDict, Field

from audit_journal.journals.enums import CauseType


class Cause(BaseModel):
    """What triggered a journaled change.

    Purely descriptive; ``context`` is free text such as a job id or an
    import source.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cause_type: CauseType = Field(
        default=CauseType.USER_ACTION,
        alias="type",
        description="Trigger classification",
    )
    context: str | None = Field(default=None, description="Additional context")

    def has_context(self) -> bool:
        return bool(self.context)
