from app.models.clinic import (
    WEEKDAYS,
    Address,
    Clinic,
    ClinicStatus,
    Contact,
    Doctor,
    Images,
    OpeningHours,
    PriceRange,
    SocialMedia,
)
from app.models.country import Country, Region
from app.models.user import User, UserRole

__all__ = [
    "WEEKDAYS",
    "Clinic", "ClinicStatus", "Address", "Contact", "Doctor", "Images",
    "OpeningHours", "PriceRange", "SocialMedia",
    "Country", "Region",
    "User", "UserRole",
]
