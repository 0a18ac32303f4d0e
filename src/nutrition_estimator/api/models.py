"""Pydantic models for estimation request payloads."""

from pydantic import BaseModel, Field

MAX_BATCH_ITEMS = 50
MAX_TEXT_LENGTH = 200


class EstimatePayload(BaseModel):
    """Single ingredient estimate request."""

    ingredient: str = Field(default="", max_length=MAX_TEXT_LENGTH)
    measurement: str = Field(default="", max_length=MAX_TEXT_LENGTH)


class BatchEstimatePayload(BaseModel):
    """Batch estimate request."""

    items: list[EstimatePayload] = Field(
        default_factory=list, max_length=MAX_BATCH_ITEMS
    )
