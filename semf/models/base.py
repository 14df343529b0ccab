"""Base model classes for SEMF scoring values.

Scoring results are plain immutable values: they are built once per scoring
call and never updated afterwards.
"""

from pydantic import BaseModel, ConfigDict


class ValueModel(BaseModel):
    """Base model for immutable result values."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
    )
