"""
Pydantic schemas for the Eco5 API.

Request payloads ignore unknown keys, so a validated payload only carries
recognized fields. Update payloads are partial: handlers read the supplied
fields with ``model_dump(exclude_unset=True)``.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    TypeAdapter,
    field_validator,
)

from eco5.timestamps import format_timestamp

_timestamp_adapter = TypeAdapter(Union[datetime, date])


def _canonical_timestamp(value):
    if value is None:
        return value
    parsed = _timestamp_adapter.validate_python(value)
    try:
        return format_timestamp(parsed)
    except OverflowError as exc:
        # Converting to UTC stepped outside year 1..9999.
        raise ValueError("timestamp out of range") from exc


# ISO date or date-time in, canonical UTC string out.
Timestamp = Annotated[str, BeforeValidator(_canonical_timestamp)]

NonEmptyStr = Annotated[str, Field(min_length=1)]


class Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class UpdatePayload(Payload):
    """Partial update: only the keys the client sent are applied."""

    def supplied_fields(self) -> dict:
        return self.model_dump(exclude_unset=True)


def _reject_null(value):
    # Validators don't run on defaults, so this only fires on an explicit null.
    if value is None:
        raise ValueError("may not be null")
    return value


def _strip_required(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


# --- Auth / users -----------------------------------------------------------


class RegisterPayload(Payload):
    email: EmailStr
    name: NonEmptyStr
    password: NonEmptyStr = Field(
        validation_alias=AliasChoices("password", "password_hash")
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, value):
        return _strip_required(value)


class LoginPayload(Payload):
    email: Optional[str] = None
    password: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("password", "password_hash")
    )


class UserUpdatePayload(UpdatePayload):
    email: Optional[EmailStr] = None
    name: Optional[NonEmptyStr] = None
    password: Optional[NonEmptyStr] = Field(
        default=None, validation_alias=AliasChoices("password", "password_hash")
    )

    @field_validator("email", "name", "password")
    @classmethod
    def reject_null(cls, value):
        return _reject_null(value)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value):
        return _strip_required(value)


class UserSearchParams(BaseModel):
    query: Optional[str] = None
    limit: int = Field(default=10, gt=0, le=200)
    offset: int = Field(default=0, ge=0)
    sort_by: Literal["name", "created_at"] = "created_at"
    sort_order: Literal["asc", "desc"] = "desc"


class UserResponse(BaseModel):
    id: str
    email: str
    name: str
    created_at: str


class RegisterResponse(UserResponse):
    token: str


class LoginResponse(BaseModel):
    auth_token: str
    user_id: str


# --- Dashboard --------------------------------------------------------------


class DashboardUpdatePayload(UpdatePayload):
    carbon_footprint: Optional[float] = Field(default=None, allow_inf_nan=False)
    historical_data: Optional[str] = None
    daily_tips: Optional[str] = None
    challenges: Optional[str] = None

    @field_validator("carbon_footprint")
    @classmethod
    def reject_null(cls, value):
        return _reject_null(value)


class DashboardResponse(BaseModel):
    user_id: str
    carbon_footprint: float
    historical_data: Optional[str] = None
    daily_tips: Optional[str] = None
    challenges: Optional[str] = None


# --- Impact calculator ------------------------------------------------------


class ImpactCalculatorUpdatePayload(UpdatePayload):
    travel_habits: Optional[str] = None
    energy_consumption: Optional[str] = None
    waste_management: Optional[str] = None


class ImpactCalculatorResponse(BaseModel):
    id: str
    user_id: str
    travel_habits: Optional[str] = None
    energy_consumption: Optional[str] = None
    waste_management: Optional[str] = None


# --- Community forum --------------------------------------------------------


class ForumThreadCreatePayload(Payload):
    user_id: Optional[NonEmptyStr] = None
    thread_title: NonEmptyStr
    content: NonEmptyStr
    created_at: Optional[Timestamp] = None


class ForumThreadUpdatePayload(UpdatePayload):
    thread_title: Optional[NonEmptyStr] = None
    content: Optional[NonEmptyStr] = None

    @field_validator("thread_title", "content")
    @classmethod
    def reject_null(cls, value):
        return _reject_null(value)


class ForumThreadResponse(BaseModel):
    id: str
    user_id: str
    thread_title: str
    content: str
    created_at: str


# --- Events -----------------------------------------------------------------


class EventCreatePayload(Payload):
    event_name: NonEmptyStr
    event_date: Timestamp
    location: Optional[str] = None
    organizer_id: Optional[NonEmptyStr] = None


class EventUpdatePayload(UpdatePayload):
    event_name: Optional[NonEmptyStr] = None
    event_date: Optional[Timestamp] = None
    location: Optional[str] = None
    organizer_id: Optional[NonEmptyStr] = None

    @field_validator("event_name", "event_date", "organizer_id")
    @classmethod
    def reject_null(cls, value):
        return _reject_null(value)


class EventResponse(BaseModel):
    id: str
    event_name: str
    event_date: str
    location: Optional[str] = None
    organizer_id: str


class DeleteResponse(BaseModel):
    success: bool
    id: str


# --- Resource library -------------------------------------------------------


class ResourceCreatePayload(Payload):
    content_type: NonEmptyStr
    title: NonEmptyStr
    description: Optional[str] = None
    content_url: Optional[str] = None
    author_id: Optional[NonEmptyStr] = None


class ResourceUpdatePayload(UpdatePayload):
    content_type: Optional[NonEmptyStr] = None
    title: Optional[NonEmptyStr] = None
    description: Optional[str] = None
    content_url: Optional[str] = None
    author_id: Optional[NonEmptyStr] = None

    @field_validator("content_type", "title", "author_id")
    @classmethod
    def reject_null(cls, value):
        return _reject_null(value)


class ResourceSearchParams(BaseModel):
    content_type: Optional[str] = None
    query: Optional[str] = None
    limit: int = Field(default=50, gt=0, le=200)
    offset: int = Field(default=0, ge=0)


class ResourceResponse(BaseModel):
    id: str
    content_type: str
    title: str
    description: Optional[str] = None
    content_url: Optional[str] = None
    author_id: str


# --- Alerts -----------------------------------------------------------------


class AlertCreatePayload(Payload):
    alert_type: NonEmptyStr
    message: NonEmptyStr
    created_at: Optional[Timestamp] = None


class AlertUpdatePayload(UpdatePayload):
    alert_type: Optional[NonEmptyStr] = None
    message: Optional[NonEmptyStr] = None

    @field_validator("alert_type", "message")
    @classmethod
    def reject_null(cls, value):
        return _reject_null(value)


class AlertResponse(BaseModel):
    id: str
    user_id: str
    alert_type: str
    message: str
    created_at: str


# --- Misc -------------------------------------------------------------------


class Pagination(BaseModel):
    limit: int = Field(default=50, gt=0, le=200)
    offset: int = Field(default=0, ge=0)


class HealthResponse(BaseModel):
    status: Literal["ok", "unhealthy"]
    database: str
    timestamp: str
