"""
Public API - country / region lookups
GET /api/v1/public/countries          - all countries
GET /api/v1/public/countries/{slug}   - one country with its regions
"""
from fastapi import APIRouter, HTTPException

from app.models.country import Country
from app.schemas.country import CountryDetail, CountryItem
from app.services import countries

router = APIRouter(prefix="/public/countries", tags=["Public - Countries"])


@router.get("", response_model=list[CountryItem])
async def list_countries():
    return [_serialize(c) for c in countries.get_all_countries()]


@router.get("/{slug}", response_model=CountryDetail)
async def get_country(slug: str):
    country = countries.get_country_by_slug(slug)
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    return {
        **_serialize(country),
        "regions": [
            {"code": code, "name": region.name, "slug": region.slug}
            for code, region in (country.regions or {}).items()
        ],
    }


def _serialize(c: Country) -> dict:
    return {
        "code": c.code,
        "name": c.name,
        "slug": c.slug,
        "flag_url": countries.get_country_flag(c.code),
        "has_regions": countries.has_regions(c.code),
    }
