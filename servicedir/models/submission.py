from __future__ import annotations

from datetime import date
from typing import Annotated, Literal, Optional, Union

from pydantic import AnyHttpUrl, EmailStr, Field, ValidationInfo, field_validator

from servicedir.models.common import SDBaseModel


class ContributorFields(SDBaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: Optional[str] = Field(None, pattern=r"^\+?[0-9 ()-]{6,20}$")
    notes: str = Field(..., min_length=10)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v.strip()


class ServiceSubmission(ContributorFields):
    submission_type: Literal["service"]
    title: str = Field(..., min_length=5)
    url: AnyHttpUrl
    category_slug: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    state: Optional[str] = None


class ShopSubmission(ContributorFields):
    submission_type: Literal["shop"]
    shop_name: str = Field(..., min_length=2)
    mall_id: str = Field(..., min_length=1)


class EventSubmission(ContributorFields):
    submission_type: Literal["event"]
    event_name: str = Field(..., min_length=5)
    mall_id: str = Field(..., min_length=1)
    date_from: date
    date_to: date

    @field_validator("date_to")
    @classmethod
    def range_not_reversed(cls, v: date, info: ValidationInfo) -> date:
        start = info.data.get("date_from")
        if start is not None and v < start:
            raise ValueError("date_to must be on or after date_from")
        return v


Submission = Annotated[
    Union[ServiceSubmission, ShopSubmission, EventSubmission],
    Field(discriminator="submission_type"),
]
