import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday")


class DocumentModel(BaseModel):
    """Firestore documents use camelCase keys; attributes stay snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self, **kwargs) -> dict:
        return self.model_dump(by_alias=True, mode="json", **kwargs)


class ClinicStatus(str, enum.Enum):
    DRAFT = "draft"            # owner is still editing, not listed publicly
    PUBLISHED = "published"    # visible in the public directory


class Address(DocumentModel):
    street: str = ""
    city: str = ""
    country: str = ""           # ISO country code, see app/data/countries.json
    region: str | None = None   # optional region/state code within the country
    postal_code: str = ""


class PriceRange(DocumentModel):
    min: float = 0
    max: float = 0
    currency: str = "€"


class Contact(DocumentModel):
    phone: str = ""
    email: str = ""
    website: str | None = None


class SocialMedia(DocumentModel):
    facebook: str | None = None
    instagram: str | None = None
    twitter: str | None = None


class OpeningHours(DocumentModel):
    open: str = ""    # "09:00"
    close: str = ""   # "18:00"


class Images(DocumentModel):
    main: str = ""
    gallery: list[str] = Field(default_factory=list)


class Doctor(DocumentModel):
    id: str = ""
    name: str = ""
    specialization: str = ""
    experience: int = 0   # years
    image: str | None = None
    qualifications: list[str] = Field(default_factory=list)


def _empty_week() -> dict[str, OpeningHours]:
    return {day: OpeningHours() for day in WEEKDAYS}


class Clinic(DocumentModel):
    id: str = ""
    name: str = ""
    slug: str = ""
    description: str = ""
    status: ClinicStatus = ClinicStatus.DRAFT

    address: Address = Field(default_factory=Address)
    services: list[str] = Field(default_factory=list)
    price_range: PriceRange = Field(default_factory=PriceRange)
    contact: Contact = Field(default_factory=Contact)
    social_media: SocialMedia | None = None
    operating_hours: dict[str, OpeningHours] = Field(default_factory=_empty_week)
    images: Images = Field(default_factory=Images)
    doctors: list[Doctor] = Field(default_factory=list)

    # ── Aggregates (not writable by owners) ─────────────────────────
    rating: float = 0
    review_count: int = 0

    user_id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_snapshot(cls, snapshot) -> "Clinic":
        return cls.model_validate({**(snapshot.to_dict() or {}), "id": snapshot.id})

    def __repr__(self) -> str:
        return f"<Clinic {self.slug} [{self.status.value}]>"
