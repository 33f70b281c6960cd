"""Pydantic models for ICS forms as returned by the admin review API.

Only the fields the export layer reads are modelled. Unknown fields in API
payloads are ignored; the scores mapping is validated strictly through
``ScoresRecord``.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ics_review.schemas.enums import IcsFormStatus
from ics_review.schemas.scores import ScoresRecord


class ApiModel(BaseModel):
    """Base for API payloads: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class IcsFormData(ApiModel):
    """Addresses and social links submitted by the applicant."""

    main_address: str
    twitter_link: Optional[str] = None
    discord_link: Optional[str] = None
    additional_addresses: Optional[list[str]] = None


class IcsComments(ApiModel):
    """Reviewer comments, one per form field plus the rejection reason."""

    reason: Optional[str] = None
    main_address: Optional[str] = None
    twitter_link: Optional[str] = None
    discord_link: Optional[str] = None
    additional_addresses: Optional[list[Optional[str]]] = None


class IcsForm(ApiModel):
    """A single ICS form under review."""

    id: int
    form: IcsFormData
    status: IcsFormStatus
    comments: IcsComments = Field(default_factory=IcsComments)
    scores: ScoresRecord = Field(default_factory=ScoresRecord)
    created_at: str = Field(description="ISO-8601 timestamp, kept verbatim for export")
    updated_at: Optional[str] = None
    issued: bool = False
    outdated: bool = False
    last_reviewer: Optional[str] = None


class IcsFormFilters(ApiModel):
    """List filters applied when the forms were fetched (used to name exports)."""

    status: Optional[IcsFormStatus] = None
    address: Optional[str] = None
    issued: Optional[bool] = None
    outdated: Optional[bool] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
