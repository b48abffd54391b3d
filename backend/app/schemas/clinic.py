from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from app.models.clinic import (
    Address,
    Contact,
    Doctor,
    Images,
    OpeningHours,
    PriceRange,
    SocialMedia,
)

# Firestore accepts at most 30 values in an "in" predicate
MAX_COUNTRY_FILTER = 30


def _unique(values: list[str] | None) -> list[str] | None:
    if values is None:
        return None
    return list(dict.fromkeys(v.strip() for v in values if v and v.strip()))


# ── Requests ─────────────────────────────────────────────────────
class ClinicFilters(BaseModel):
    countries: list[str] | None = Field(None, max_length=MAX_COUNTRY_FILTER)
    region: str | None = None
    city: str | None = None
    services: list[str] | None = None
    min_rating: float | None = Field(None, ge=0)
    min_price: float | None = Field(None, ge=0)
    max_price: float | None = Field(None, ge=0)


class ClinicCreate(BaseModel):
    # left empty, a "Draft Clinic NNNN" name is generated
    name: str | None = Field(None, max_length=200)
    description: str = Field("", max_length=5000)
    address: Address = Field(default_factory=Address)
    services: list[str] = Field(default_factory=list)
    price_range: PriceRange = Field(default_factory=PriceRange)
    contact: Contact = Field(default_factory=Contact)
    social_media: SocialMedia | None = None
    operating_hours: dict[str, OpeningHours] | None = None
    images: Images = Field(default_factory=Images)
    doctors: list[Doctor] = Field(default_factory=list)

    @field_validator("services")
    @classmethod
    def dedupe_services(cls, v: list[str]) -> list[str]:
        return _unique(v)


class ClinicUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)
    address: Address | None = None
    services: list[str] | None = None
    price_range: PriceRange | None = None
    contact: Contact | None = None
    social_media: SocialMedia | None = None
    operating_hours: dict[str, OpeningHours] | None = None
    images: Images | None = None
    doctors: list[Doctor] | None = None

    @field_validator("services")
    @classmethod
    def dedupe_services(cls, v: list[str] | None) -> list[str] | None:
        return _unique(v)


# ── Responses ────────────────────────────────────────────────────
class ClinicListItem(BaseModel):
    id: str
    name: str
    slug: str
    status: str
    url: str
    address: Any
    services: list
    price_range: Any
    rating: float
    review_count: int
    main_image: Optional[str]
    updated_at: Optional[str]


class ClinicDetail(ClinicListItem):
    description: str
    contact: Any
    social_media: Optional[Any]
    operating_hours: Any
    images: Any
    doctors: list
    user_id: str
    created_at: Optional[str]


class ClinicListResponse(BaseModel):
    items: list[ClinicListItem]
    error: Optional[str]
    truncated: bool


class ValidationReport(BaseModel):
    is_valid: bool
    missing_fields: list[str]
