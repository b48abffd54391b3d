from app.core.state import ClinicListState
from app.models.clinic import Clinic
from app.services.slugs import get_clinic_url


def serialize_clinic_item(c: Clinic) -> dict:
    return {
        "id": c.id,
        "name": c.name,
        "slug": c.slug,
        "status": c.status.value,
        "url": get_clinic_url(c),
        "address": c.address.model_dump(),
        "services": c.services,
        "price_range": c.price_range.model_dump(),
        "rating": c.rating,
        "review_count": c.review_count,
        "main_image": c.images.main or None,
        "updated_at": c.updated_at.isoformat() if c.updated_at else None,
    }


def serialize_clinic(c: Clinic) -> dict:
    return {
        **serialize_clinic_item(c),
        "description": c.description,
        "contact": c.contact.model_dump(),
        "social_media": c.social_media.model_dump() if c.social_media else None,
        "operating_hours": {day: hours.model_dump() for day, hours in c.operating_hours.items()},
        "images": c.images.model_dump(),
        "doctors": [d.model_dump() for d in c.doctors],
        "user_id": c.user_id,
        "created_at": c.created_at.isoformat() if c.created_at else None,
    }


def serialize_list(state: ClinicListState) -> dict:
    return {
        "items": [serialize_clinic_item(c) for c in state.clinics],
        "error": state.error,
        "truncated": state.truncated,
    }
