"""
Clinic repository - Firestore reads and writes for clinic documents
- fetch_published_clinics: public directory search (server filter + in-memory filter)
- get_clinic_by_slug: published clinic detail
- fetch_my_clinics: the signed-in owner's clinics, drafts included
- get_clinic / add_clinic / update_clinic / publish_clinic / unpublish_clinic

Fetch operations report failures through the injected ClinicListState and
never raise. Write operations log provider failures and raise ProviderError
with a generic message.
"""
import logging

from google.api_core.exceptions import GoogleAPIError
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import And, FieldFilter
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from app.core.config import settings
from app.core.exceptions import AuthorizationError, ClinicDirectoryError, NotFoundError, ProviderError
from app.core.state import ClinicListState
from app.models.clinic import Clinic, ClinicStatus
from app.models.user import User
from app.schemas.clinic import ClinicCreate, ClinicFilters, ClinicUpdate
from app.services.clinic_filters import apply_client_filters, build_server_filter, has_client_filters
from app.services.slugs import generate_draft_clinic_name, generate_unique_slug

logger = logging.getLogger(__name__)

LOAD_ERROR = "Error loading clinics. Please try again."

# optional on the stored document, so an explicit null in a PATCH clears them
CLEARABLE_FIELDS = {"social_media"}


class ClinicRepository:
    def __init__(self, db, state: ClinicListState | None = None, collection: str | None = None):
        self.db = db
        self.state = state or ClinicListState()
        self.collection_name = collection or settings.CLINICS_COLLECTION
        self.page_limit = settings.PUBLISHED_FETCH_LIMIT

    @property
    def collection(self):
        return self.db.collection(self.collection_name)

    # ── Reads ────────────────────────────────────────────────────────
    async def fetch_published_clinics(self, filters: ClinicFilters | None = None) -> list[Clinic]:
        self.state.start_loading()
        try:
            query = (
                self.collection.where(filter=build_server_filter(filters))
                .order_by("rating", direction=firestore.Query.DESCENDING)
                .limit(self.page_limit)
            )
            page = await self._run_query(query)
            clinics = apply_client_filters(page, filters)

            # in-memory filters only saw the first page; matches beyond it are lost
            truncated = has_client_filters(filters) and len(page) >= self.page_limit
            if truncated:
                logger.warning(
                    f"Published clinic page hit the {self.page_limit} cap before in-memory filters; "
                    f"{len(clinics)} of {len(page)} kept, more matches may exist"
                )
            self.state.set_clinics(clinics, truncated=truncated)
        except ProviderError as e:
            logger.error(f"Error fetching published clinics: {e}")
            self.state.fail(LOAD_ERROR)
        finally:
            self.state.finish_loading()
        return self.state.clinics

    async def get_clinic_by_slug(self, slug: str) -> Clinic | None:
        """Published clinics only. None when absent or when the query fails."""
        query = self.collection.where(
            filter=And(filters=[
                FieldFilter("slug", "==", slug),
                FieldFilter("status", "==", ClinicStatus.PUBLISHED.value),
            ])
        ).limit(1)
        try:
            clinics = await self._run_query(query)
        except ProviderError as e:
            logger.error(f"Error fetching clinic by slug '{slug}': {e}")
            return None
        return clinics[0] if clinics else None

    async def fetch_my_clinics(self, owner: User | None) -> list[Clinic]:
        self.state.start_loading()
        try:
            if owner is None:
                raise AuthorizationError("User must be authenticated to view their clinics")
            query = self.collection.where(filter=FieldFilter("userId", "==", owner.id)).order_by(
                "updatedAt", direction=firestore.Query.DESCENDING
            )
            self.state.set_clinics(await self._run_query(query))
        except ClinicDirectoryError as e:
            self.state.fail(str(e) or "Error loading your clinics")
        finally:
            self.state.finish_loading()
        return self.state.clinics

    async def get_clinic(self, clinic_id: str) -> Clinic:
        try:
            snapshot = await self.collection.document(clinic_id).get()
        except GoogleAPIError as e:
            logger.error(f"Error reading clinic {clinic_id}: {e}")
            raise ProviderError("Error loading clinic") from e
        if not snapshot.exists:
            raise NotFoundError("Clinic not found")
        try:
            return Clinic.from_snapshot(snapshot)
        except ValidationError as e:
            logger.error(f"Malformed clinic document {clinic_id}: {e}")
            raise ProviderError("Error loading clinic") from e

    # ── Writes ───────────────────────────────────────────────────────
    async def add_clinic(self, data: ClinicCreate, owner: User | None) -> str:
        """Create a draft owned by `owner`. Returns the new document id."""
        if owner is None:
            raise AuthorizationError("User must be authenticated to create a clinic")

        name = data.name or generate_draft_clinic_name()
        try:
            slug = generate_unique_slug(name, await self._existing_slugs())
            clinic = Clinic.model_validate({
                **data.model_dump(exclude_none=True),
                "name": name,
                "slug": slug,
                "status": ClinicStatus.DRAFT,
                "user_id": owner.id,
            })
            document = clinic.to_document(exclude={"id", "created_at", "updated_at"})
            document["createdAt"] = firestore.SERVER_TIMESTAMP
            document["updatedAt"] = firestore.SERVER_TIMESTAMP

            logger.info(f"Adding clinic '{slug}' for user {owner.id}")
            _, ref = await self.collection.add(document)
        except GoogleAPIError as e:
            logger.error(f"Error adding clinic: {e}")
            raise ProviderError("Error saving clinic") from e
        return ref.id

    async def update_clinic(self, clinic_id: str, data: ClinicUpdate) -> None:
        """Partial update. A changed name gets a fresh unique slug.

        Sent fields replace the stored value whole. null clears a clearable
        field and is ignored for the rest.
        """
        current = await self.get_clinic(clinic_id)

        changes = {
            to_camel(field): value
            for field, value in data.model_dump(exclude_unset=True, by_alias=True, mode="json").items()
            if value is not None or field in CLEARABLE_FIELDS
        }
        try:
            if data.name and data.name != current.name:
                changes["slug"] = generate_unique_slug(data.name, await self._existing_slugs())
            changes["updatedAt"] = firestore.SERVER_TIMESTAMP

            logger.info(f"Updating clinic {clinic_id}: {', '.join(sorted(changes))}")
            await self.collection.document(clinic_id).update(changes)
        except GoogleAPIError as e:
            logger.error(f"Error updating clinic {clinic_id}: {e}")
            raise ProviderError("Error saving clinic") from e

    async def add_clinic_image(self, clinic_id: str, url: str, kind: str = "gallery") -> None:
        """Set images.main, or append to images.gallery."""
        if kind == "main":
            changes = {"images.main": url}
        else:
            changes = {"images.gallery": firestore.ArrayUnion([url])}
        changes["updatedAt"] = firestore.SERVER_TIMESTAMP
        try:
            await self.collection.document(clinic_id).update(changes)
        except GoogleAPIError as e:
            logger.error(f"Error attaching image to clinic {clinic_id}: {e}")
            raise ProviderError("Error saving clinic") from e

    async def publish_clinic(self, clinic_id: str) -> None:
        """Flip to published. Completeness is the caller's job (see validate_clinic)."""
        await self._set_status(clinic_id, ClinicStatus.PUBLISHED)

    async def unpublish_clinic(self, clinic_id: str) -> None:
        await self._set_status(clinic_id, ClinicStatus.DRAFT)

    # ── Helpers ──────────────────────────────────────────────────────
    async def _set_status(self, clinic_id: str, status: ClinicStatus) -> None:
        logger.info(f"Setting clinic {clinic_id} status to {status.value}")
        try:
            await self.collection.document(clinic_id).update({
                "status": status.value,
                "updatedAt": firestore.SERVER_TIMESTAMP,
            })
        except GoogleAPIError as e:
            logger.error(f"Error setting clinic {clinic_id} to {status.value}: {e}")
            raise ProviderError("Error saving clinic") from e

    async def _run_query(self, query) -> list[Clinic]:
        try:
            snapshots = await query.get()
            return [Clinic.from_snapshot(s) for s in snapshots]
        except (GoogleAPIError, ValidationError) as e:
            logger.error(f"Firestore query error: {e}")
            raise ProviderError("Error loading clinics") from e

    async def _existing_slugs(self) -> list[str]:
        """Every slug in the collection, across all owners."""
        snapshots = await self.collection.select(["slug"]).get()
        slugs = [(s.to_dict() or {}).get("slug") for s in snapshots]
        return [slug for slug in slugs if slug is not None]
