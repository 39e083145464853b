"""
Common response models and utilities.

Write-result wrappers and error schemas shared by all routers.

Dependencies: pydantic, pymongo
System role: Common API response structures
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pymongo.results import InsertOneResult, UpdateResult


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: Any = Field(description="Error message")
    detail: Any | None = Field(default=None, description="Additional error context")


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str


class InsertOutcome(BaseModel):
    """Outcome of a single-document insert, keyed like the MongoDB driver reports it."""

    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    inserted_id: str = Field(alias="insertedId")

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertOutcome":
        return cls(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))


class UpdateOutcome(BaseModel):
    """Outcome of a single-document update."""

    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    matched_count: int = Field(alias="matchedCount")
    modified_count: int = Field(alias="modifiedCount")
    upserted_id: str | None = Field(default=None, alias="upsertedId")
    upserted_count: int = Field(default=0, alias="upsertedCount")

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateOutcome":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_id=str(upserted_id) if upserted_id is not None else None,
            upserted_count=1 if upserted_id is not None else 0,
        )


class InsertResponse(BaseModel):
    """Response wrapper for inserts."""

    result: InsertOutcome


class UpdateResponse(BaseModel):
    """Response wrapper for updates."""

    result: UpdateOutcome
