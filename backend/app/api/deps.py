from fastapi import Depends

from app.core.firebase import get_db
from app.core.state import ClinicListState
from app.services.clinic_repository import ClinicRepository


async def get_clinic_repository(db=Depends(get_db)) -> ClinicRepository:
    """One repository, and one clinic list state, per request."""
    return ClinicRepository(db, ClinicListState())
