"""Schemas for service metadata endpoints."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContactInfoSchema(BaseModel):
    """Who to reach out to about this service."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    contact_email: str = Field(..., examples=["loans-support@example.com"])
    contact_numbers: List[str] = Field(default_factory=list)
