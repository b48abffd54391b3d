"""
Public API - clinic directory
GET /api/v1/public/clinics          - published clinics, filtered, rating desc
GET /api/v1/public/clinics/{slug}   - published clinic detail
"""
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import ValidationError

from app.api.deps import get_clinic_repository
from app.api.serializers import serialize_clinic, serialize_list
from app.schemas.clinic import ClinicDetail, ClinicFilters, ClinicListResponse
from app.services.clinic_repository import ClinicRepository

router = APIRouter(prefix="/public/clinics", tags=["Public - Clinics"])


@router.get("", response_model=ClinicListResponse)
async def list_published_clinics(
    response: Response,
    countries: list[str] | None = Query(default=None),
    region: str | None = None,
    city: str | None = None,
    services: list[str] | None = Query(default=None),
    min_rating: float | None = None,
    min_price: float | None = None,
    max_price: float | None = None,
    repo: ClinicRepository = Depends(get_clinic_repository),
):
    """
    Directory search.
    Country and minimum rating are evaluated by Firestore; services, city,
    region and price run over the first page. `truncated` is true when that
    page was full, so more matches may exist.
    """
    try:
        filters = ClinicFilters(
            countries=countries,
            region=region,
            city=city,
            services=services,
            min_rating=min_rating,
            min_price=min_price,
            max_price=max_price,
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False))

    await repo.fetch_published_clinics(filters)
    if repo.state.error:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return serialize_list(repo.state)


@router.get("/{slug}", response_model=ClinicDetail)
async def get_published_clinic(slug: str, repo: ClinicRepository = Depends(get_clinic_repository)):
    clinic = await repo.get_clinic_by_slug(slug)
    if not clinic:
        raise HTTPException(status_code=404, detail="Clinic not found")
    return serialize_clinic(clinic)
