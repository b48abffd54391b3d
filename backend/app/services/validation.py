"""
Publish-readiness checks for clinic and doctor records.

Works on any partial shape (a stored document, a request body, a Clinic
model). Field paths are reported in the camelCase form used by stored
documents, e.g. "address.postalCode" or "doctors[0].qualifications".
"""
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel

from app.models.clinic import WEEKDAYS

REQUIRED_CLINIC_FIELDS = (
    "name",
    "description",
    "address.street",
    "address.city",
    "address.country",
    "address.postalCode",
    "contact.phone",
    "contact.email",
    "services",
    "priceRange.min",
    "priceRange.max",
    "priceRange.currency",
    "operatingHours",
)

REQUIRED_DOCTOR_FIELDS = ("name", "specialization", "experience", "qualifications")


class Valid(BaseModel):
    is_valid: Literal[True] = True
    missing_fields: list[str] = []


class Invalid(BaseModel):
    is_valid: Literal[False] = False
    missing_fields: list[str]


ValidationResult = Valid | Invalid


def _as_mapping(record: Any) -> Mapping:
    if isinstance(record, BaseModel):
        return record.model_dump(by_alias=True)
    if isinstance(record, Mapping):
        return record
    return {}


def _resolve(record: Mapping, path: str) -> Any:
    value: Any = record
    for part in path.split("."):
        if not isinstance(value, Mapping):
            return None
        value = value.get(part)
        if not value:
            return None
    return value


def _result(missing: list[str]) -> ValidationResult:
    # a field can be flagged by more than one rule; report it once
    missing = list(dict.fromkeys(missing))
    return Invalid(missing_fields=missing) if missing else Valid()


def validate_doctor(doctor: Any) -> ValidationResult:
    record = _as_mapping(doctor)
    missing = []
    for field in REQUIRED_DOCTOR_FIELDS:
        if not record.get(field):
            missing.append(field)
    return _result(missing)


def validate_clinic(clinic: Any) -> ValidationResult:
    """Collect every required path that is absent or blank. Never raises."""
    record = _as_mapping(clinic)
    missing = [path for path in REQUIRED_CLINIC_FIELDS if not _resolve(record, path)]

    hours = record.get("operatingHours")
    if not isinstance(hours, Mapping):
        hours = {}
    for day in WEEKDAYS:
        slot = hours.get(day)
        if not isinstance(slot, Mapping) or not slot.get("open") or not slot.get("close"):
            missing.append(f"operatingHours.{day}")

    if not record.get("services"):
        missing.append("services")

    doctors = record.get("doctors") or []
    if isinstance(doctors, list):
        for index, doctor in enumerate(doctors):
            result = validate_doctor(doctor)
            missing.extend(f"doctors[{index}].{field}" for field in result.missing_fields)

    return _result(missing)
