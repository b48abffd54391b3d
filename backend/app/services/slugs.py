"""URL slugs and small naming helpers for clinics"""
import random
import re
from typing import Iterable

from slugify import slugify

from app.models.clinic import Clinic
from app.services.countries import get_country_slug

# punctuation is dropped, not turned into a separator
STRIP_PATTERN = re.compile(r"[^\w\s-]")
# what may survive in a slug once transliterated and lowercased
DISALLOWED_PATTERN = r"[^-a-z0-9_]+"


def generate_slug(name: str) -> str:
    """Lowercase, transliterated, hyphen-separated. "Dr. Smith's Clinic" -> 'dr-smiths-clinic'"""
    stripped = STRIP_PATTERN.sub("", name.strip())
    return slugify(stripped, separator="-", regex_pattern=DISALLOWED_PATTERN)


def generate_unique_slug(name: str, existing_slugs: Iterable[str]) -> str:
    """Append -1, -2, ... to the base slug until it is not in existing_slugs.

    A name with nothing sluggable in it gets a bare number ("1", "2", ...).
    """
    taken = set(existing_slugs)
    base = generate_slug(name)
    if base and base not in taken:
        return base
    counter = 1
    while True:
        slug = f"{base}-{counter}" if base else str(counter)
        if slug not in taken:
            return slug
        counter += 1


def generate_draft_clinic_name() -> str:
    return f"Draft Clinic {random.randint(0, 9999)}"


def get_clinic_url(clinic: Clinic) -> str:
    return f"/clinics/{get_country_slug(clinic.address.country)}/{clinic.slug}"
