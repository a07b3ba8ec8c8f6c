"""Shared configuration for API response models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class GraphModel(BaseModel):
    """Base model for Academic Graph payloads.

    Payload keys are camelCase; unknown keys are ignored so any model can be
    decoded from a response carrying more fields than it declares.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )
