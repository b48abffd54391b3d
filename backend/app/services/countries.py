"""
Country / region reference table.

Loaded once from app/data/countries.json at import time and never mutated.
Lookups by code fall back the way the directory URLs expect: unknown country
codes map to their lowercased code as slug and to themselves as name.
"""
import json
import logging
from pathlib import Path

from app.models.country import Country, Region

logger = logging.getLogger(__name__)

DATA_FILE = Path(__file__).resolve().parent.parent / "data" / "countries.json"
FLAG_URL = "https://flagcdn.com/{code}.svg"


def _load(path: Path) -> list[Country]:
    with path.open(encoding="utf-8") as f:
        raw = json.load(f)
    return [Country.model_validate(c) for c in raw["countries"]]


_COUNTRIES: list[Country] = _load(DATA_FILE)
_BY_CODE: dict[str, Country] = {c.code: c for c in _COUNTRIES}
_CODE_BY_SLUG: dict[str, str] = {c.slug: c.code for c in _COUNTRIES}
_REGION_CODE_BY_SLUG: dict[str, dict[str, str]] = {
    c.code: {region.slug: code for code, region in c.regions.items()}
    for c in _COUNTRIES
    if c.regions
}

# code -> name, and code -> {region code -> region name}
COUNTRIES: dict[str, str] = {c.code: c.name for c in _COUNTRIES}
REGIONS: dict[str, dict[str, str]] = {
    c.code: {code: region.name for code, region in c.regions.items()}
    for c in _COUNTRIES
    if c.regions
}

logger.debug(f"Loaded {len(_COUNTRIES)} countries from {DATA_FILE.name}")


def get_all_countries() -> list[Country]:
    return list(_COUNTRIES)


def get_country(code: str) -> Country | None:
    return _BY_CODE.get(code)


def get_country_name(code: str) -> str:
    country = _BY_CODE.get(code)
    return country.name if country else code


def get_country_slug(code: str) -> str:
    country = _BY_CODE.get(code)
    return country.slug if country else code.lower()


def get_country_code_by_slug(slug: str) -> str | None:
    return _CODE_BY_SLUG.get(slug)


def get_country_by_slug(slug: str) -> Country | None:
    code = _CODE_BY_SLUG.get(slug)
    return _BY_CODE.get(code) if code else None


def is_valid_country_code(code: str) -> bool:
    return code in _BY_CODE


def get_country_flag(code: str) -> str:
    return FLAG_URL.format(code=code.lower())


def has_regions(country_code: str) -> bool:
    country = _BY_CODE.get(country_code)
    return bool(country and country.regions)


def get_regions(country_code: str) -> dict[str, Region] | None:
    country = _BY_CODE.get(country_code)
    return country.regions if country else None


def get_region_name(country_code: str, region_code: str) -> str | None:
    region = (get_regions(country_code) or {}).get(region_code)
    return region.name if region else None


def get_region_slug(country_code: str, region_code: str) -> str | None:
    region = (get_regions(country_code) or {}).get(region_code)
    return region.slug if region else None


def get_region_by_slug(country_code: str, slug: str) -> dict | None:
    """{"code": ..., "name": ...} for a region slug within a country, or None."""
    region_code = _REGION_CODE_BY_SLUG.get(country_code, {}).get(slug)
    if not region_code:
        return None
    return {"code": region_code, "name": REGIONS[country_code][region_code]}
