"""Journal recording configuration."""

from pydantic import BaseModel, Field


class JournalConfig(BaseModel):
    """Behaviour of the journal service."""

    max_version_retries: int = Field(
        default=3,
        ge=0,
        description="Retries after a version conflict before giving up",
    )
    skip_empty_updates: bool = Field(
        default=True,
        description="Skip updates with neither changes nor notes",
    )
