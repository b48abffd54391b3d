"""
Owner API - clinic management (Firebase ID token required)
GET    /me                          - signed-in user
GET    /clinics/mine                - own clinics, drafts included
POST   /clinics                     - create draft
GET    /clinics/{id}                - own clinic detail
PATCH  /clinics/{id}                - partial update (slug follows name)
GET    /clinics/{id}/validation     - publish readiness
PATCH  /clinics/{id}/publish        - publish when complete
PATCH  /clinics/{id}/unpublish      - back to draft
POST   /clinics/{id}/images         - upload main / gallery image (raw body)
"""
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from app.api.deps import get_clinic_repository
from app.api.serializers import serialize_clinic, serialize_list
from app.core.config import settings
from app.core.exceptions import ForbiddenError, ProviderError
from app.core.security import get_current_user
from app.models.clinic import Clinic
from app.models.user import User
from app.schemas.clinic import ClinicCreate, ClinicDetail, ClinicListResponse, ClinicUpdate, ValidationReport
from app.schemas.user import UserResponse
from app.services import image_storage
from app.services.clinic_repository import ClinicRepository
from app.services.validation import validate_clinic

router = APIRouter(tags=["Owner - Clinics"])


@router.get("/me", response_model=UserResponse)
async def me(user: User = Depends(get_current_user)):
    return {
        "id": user.id,
        "email": user.email,
        "role": user.role.value,
        "created_at": user.created_at.isoformat(),
    }


@router.get("/clinics/mine", response_model=ClinicListResponse)
async def list_my_clinics(
    response: Response,
    user: User = Depends(get_current_user),
    repo: ClinicRepository = Depends(get_clinic_repository),
):
    await repo.fetch_my_clinics(user)
    if repo.state.error:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return serialize_list(repo.state)


@router.post("/clinics", status_code=status.HTTP_201_CREATED, response_model=ClinicDetail)
async def create_clinic(
    body: ClinicCreate,
    user: User = Depends(get_current_user),
    repo: ClinicRepository = Depends(get_clinic_repository),
):
    """New clinics always start as drafts with a generated slug."""
    clinic_id = await repo.add_clinic(body, user)
    return serialize_clinic(await repo.get_clinic(clinic_id))


@router.get("/clinics/{clinic_id}", response_model=ClinicDetail)
async def get_my_clinic(
    clinic_id: str,
    user: User = Depends(get_current_user),
    repo: ClinicRepository = Depends(get_clinic_repository),
):
    return serialize_clinic(await _get_owned_or_404(repo, clinic_id, user))


@router.patch("/clinics/{clinic_id}", response_model=ClinicDetail)
async def update_my_clinic(
    clinic_id: str,
    body: ClinicUpdate,
    user: User = Depends(get_current_user),
    repo: ClinicRepository = Depends(get_clinic_repository),
):
    await _get_owned_or_404(repo, clinic_id, user)
    await repo.update_clinic(clinic_id, body)
    return serialize_clinic(await repo.get_clinic(clinic_id))


@router.get("/clinics/{clinic_id}/validation", response_model=ValidationReport)
async def check_my_clinic(
    clinic_id: str,
    user: User = Depends(get_current_user),
    repo: ClinicRepository = Depends(get_clinic_repository),
):
    clinic = await _get_owned_or_404(repo, clinic_id, user)
    return validate_clinic(clinic).model_dump()


@router.patch("/clinics/{clinic_id}/publish", response_model=ClinicDetail)
async def publish_my_clinic(
    clinic_id: str,
    user: User = Depends(get_current_user),
    repo: ClinicRepository = Depends(get_clinic_repository),
):
    """Only complete clinics are published; otherwise 422 lists the missing fields."""
    clinic = await _get_owned_or_404(repo, clinic_id, user)
    result = validate_clinic(clinic)
    if not result.is_valid:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": "Clinic is incomplete", "missing_fields": result.missing_fields},
        )
    await repo.publish_clinic(clinic_id)
    return serialize_clinic(await repo.get_clinic(clinic_id))


@router.patch("/clinics/{clinic_id}/unpublish", response_model=ClinicDetail)
async def unpublish_my_clinic(
    clinic_id: str,
    user: User = Depends(get_current_user),
    repo: ClinicRepository = Depends(get_clinic_repository),
):
    await _get_owned_or_404(repo, clinic_id, user)
    await repo.unpublish_clinic(clinic_id)
    return serialize_clinic(await repo.get_clinic(clinic_id))


@router.post("/clinics/{clinic_id}/images", response_model=ClinicDetail)
async def upload_clinic_image(
    clinic_id: str,
    request: Request,
    kind: Literal["main", "gallery"] = Query(default="gallery"),
    user: User = Depends(get_current_user),
    repo: ClinicRepository = Depends(get_clinic_repository),
):
    """Raw image bytes in the body; Content-Type must be JPEG, PNG or WebP."""
    await _get_owned_or_404(repo, clinic_id, user)

    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type not in image_storage.EXTENSIONS:
        raise HTTPException(status_code=415, detail="Unsupported image type")
    data = await request.body()
    if not data:
        raise HTTPException(status_code=400, detail="Empty image")
    if len(data) > settings.MAX_IMAGE_BYTES:
        raise HTTPException(status_code=413, detail="Image too large")

    image = await image_storage.upload_clinic_image(clinic_id, data, content_type)
    try:
        await repo.add_clinic_image(clinic_id, image.url, kind)
    except ProviderError:
        await image_storage.delete_clinic_image(image.path)
        raise
    return serialize_clinic(await repo.get_clinic(clinic_id))


# ── Helpers ──────────────────────────────────────────────────────
async def _get_owned_or_404(repo: ClinicRepository, clinic_id: str, user: User) -> Clinic:
    clinic = await repo.get_clinic(clinic_id)
    if clinic.user_id != user.id:
        raise ForbiddenError("You do not own this clinic")
    return clinic
