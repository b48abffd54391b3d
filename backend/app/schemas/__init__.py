from app.schemas.clinic import (
    ClinicCreate,
    ClinicDetail,
    ClinicFilters,
    ClinicListItem,
    ClinicListResponse,
    ClinicUpdate,
    ValidationReport,
)
from app.schemas.country import CountryDetail, CountryItem, RegionItem
from app.schemas.user import UserResponse

__all__ = [
    "ClinicCreate",
    "ClinicDetail",
    "ClinicFilters",
    "ClinicListItem",
    "ClinicListResponse",
    "ClinicUpdate",
    "ValidationReport",
    "CountryDetail",
    "CountryItem",
    "RegionItem",
    "UserResponse",
]
