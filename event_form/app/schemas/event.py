"""
Event models for the creation form.

``EventDraft`` is the mutable form state: it accepts anything the user
types and is only checked when validated.  ``EventCreateRequest`` is
the payload sent to the remote events API and is only ever built from
a draft that passed validation.  The remaining models describe the
HTTP surface of this service.
"""

import datetime
from dataclasses import dataclass, fields
from typing import List, Optional, Union

from pydantic import BaseModel, Field


DRAFT_FIELDS = ("eventname", "local", "date", "hour", "description")


def coerce_date(value: object) -> Optional[Union[datetime.date, str]]:
    """Convert a date picker value to a ``date``.

    ``None`` and empty strings mean "no date".  Strings that are not ISO
    dates are returned unchanged so that validation can report them.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    text = str(value).strip()
    try:
        return datetime.date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.datetime.fromisoformat(text).date()
    except ValueError:
        return text


@dataclass
class EventDraft:
    """The not-yet-submitted event, as typed into the form."""

    eventname: str = ""
    local: str = ""
    date: Optional[Union[datetime.date, str]] = None
    hour: str = ""
    description: str = ""

    def set_field(self, name: str, value: object) -> None:
        """Update a single field.

        Raises ``KeyError`` for names that are not form fields.
        """
        if name not in DRAFT_FIELDS:
            raise KeyError(name)
        if name == "date":
            self.date = coerce_date(value)
        else:
            setattr(self, name, "" if value is None else str(value))

    def to_read(self) -> "DraftRead":
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        if isinstance(self.date, datetime.date):
            data["date"] = self.date.isoformat()
        return DraftRead(**data)


class EventCreateRequest(BaseModel):
    """Payload for ``POST /events`` on the remote API."""

    title: str = Field(..., examples=["Meetup"])
    location: str = Field(..., examples=["Downtown Hall"])
    description: str = Field(..., examples=["Monthly community meetup"])
    date: Optional[datetime.date] = Field(None, examples=["2025-09-01"])
    organizer_id: str = Field(..., alias="organizerId", examples=["b0745f32-0bbb-4674-ba6e-8b0e1d5f9294"])

    model_config = {
        "populate_by_name": True,
    }

    def to_payload(self) -> dict:
        """Serialize with wire names (``organizerId``) and ISO dates."""
        return self.model_dump(by_alias=True, mode="json")


class FieldError(BaseModel):
    field: str
    message: str


class DraftRead(BaseModel):
    eventname: str = ""
    local: str = ""
    date: Optional[str] = None
    hour: str = ""
    description: str = ""


class FieldValue(BaseModel):
    """Body of a field update.  ``null`` clears the field."""

    value: Optional[str] = Field(None, examples=["Meetup"])


class FormState(BaseModel):
    """Everything the form page displays.

    ``message`` is the single status line: a success confirmation or the
    error of the last submission attempt.
    """

    draft: DraftRead
    errors: List[FieldError] = Field(default_factory=list)
    message: Optional[str] = None
