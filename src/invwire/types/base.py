"""Strict, immutable pydantic base model shared by records and messages."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Instances are frozen, so they compare and hash by value and can be handed
    to any number of readers without copying. Unknown fields are rejected and
    inputs are never coerced across types.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )
