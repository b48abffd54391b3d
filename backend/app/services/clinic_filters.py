"""
Search filter composition for the public directory.

Firestore evaluates status / country / rating (the predicates the composite
indexes cover) before ordering by rating and applying the page cap. The
remaining filters run in memory over that capped page.
"""
from google.cloud.firestore_v1.base_query import And, FieldFilter

from app.models.clinic import Clinic, ClinicStatus
from app.schemas.clinic import ClinicFilters


def build_server_filter(filters: ClinicFilters | None) -> And:
    conditions = [FieldFilter("status", "==", ClinicStatus.PUBLISHED.value)]
    if filters and filters.countries:
        conditions.append(FieldFilter("address.country", "in", filters.countries))
    if filters and filters.min_rating:
        conditions.append(FieldFilter("rating", ">=", filters.min_rating))
    return And(filters=conditions)


def has_client_filters(filters: ClinicFilters | None) -> bool:
    if not filters:
        return False
    return bool(
        filters.services
        or filters.city
        or filters.region
        or filters.min_price is not None
        or filters.max_price is not None
    )


def apply_client_filters(clinics: list[Clinic], filters: ClinicFilters | None) -> list[Clinic]:
    """Narrow an already-fetched page. Order is preserved."""
    if not filters:
        return clinics

    result = clinics
    if filters.services:
        wanted = set(filters.services)
        result = [c for c in result if wanted.issubset(c.services)]
    if filters.city:
        city = filters.city.lower()
        result = [c for c in result if city in c.address.city.lower()]
    if filters.region:
        result = [c for c in result if c.address.region == filters.region]
    if filters.min_price is not None:
        result = [c for c in result if c.price_range.min >= filters.min_price]
    if filters.max_price is not None:
        result = [c for c in result if c.price_range.max <= filters.max_price]
    return result
