"""Pydantic schemas for API requests and responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProposalCreate(BaseModel):
    """Proposal create request."""

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)

    @field_validator("title", "description")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class ProposalResponse(BaseModel):
    """Proposal response."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: str
    created_at: datetime
    approve: int = 0
    reject: int = 0
    pass_: int = Field(0, alias="pass")


class VoteRequest(BaseModel):
    """Vote request: 0 = approve, 1 = reject, 2 or 3 = pass."""

    option: int


class Proposal(BaseModel):
    """Proposal as seen by the client: identifiers and timestamps are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str
    description: str
