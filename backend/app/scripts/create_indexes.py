"""
Composite index provisioning for the clinics collection (one-shot, run by an admin)

    python -m app.scripts.create_indexes

- (address.country ASC, rating DESC)   - directory search by country
- (address.city ASC, rating DESC)      - city listings
- (services CONTAINS, rating DESC)     - service listings
Indexes that already exist are skipped.
"""
import logging
import sys

from google.api_core.exceptions import AlreadyExists, GoogleAPIError
from google.cloud import firestore_admin_v1

from app.core.config import settings
from app.core.exceptions import ConfigurationError
from app.core.firebase import init_firebase

logger = logging.getLogger(__name__)

ASC = firestore_admin_v1.Index.IndexField.Order.ASCENDING
DESC = firestore_admin_v1.Index.IndexField.Order.DESCENDING
CONTAINS = firestore_admin_v1.Index.IndexField.ArrayConfig.CONTAINS

CLINIC_INDEXES = [
    [("address.country", ASC), ("rating", DESC)],
    [("address.city", ASC), ("rating", DESC)],
    [("services", CONTAINS), ("rating", DESC)],
]


def _field(path: str, mode) -> firestore_admin_v1.Index.IndexField:
    if isinstance(mode, firestore_admin_v1.Index.IndexField.ArrayConfig):
        return firestore_admin_v1.Index.IndexField(field_path=path, array_config=mode)
    return firestore_admin_v1.Index.IndexField(field_path=path, order=mode)


def build_indexes() -> list[firestore_admin_v1.Index]:
    return [
        firestore_admin_v1.Index(
            query_scope=firestore_admin_v1.Index.QueryScope.COLLECTION,
            fields=[_field(path, mode) for path, mode in index_fields],
        )
        for index_fields in CLINIC_INDEXES
    ]


def collection_group_path(project_id: str, collection: str) -> str:
    return f"projects/{project_id}/databases/(default)/collectionGroups/{collection}"


def create_indexes(client, project_id: str, collection: str) -> int:
    """Returns the number of indexes created. Waits for each build to finish."""
    parent = collection_group_path(project_id, collection)
    created = 0
    for index in build_indexes():
        paths = [f.field_path for f in index.fields]
        try:
            operation = client.create_index(parent=parent, index=index)
            operation.result()
        except AlreadyExists:
            logger.info(f"Index on {collection} {paths} already exists")
            continue
        created += 1
        logger.info(f"Created index for {collection} with fields: {paths}")
    return created


def main() -> int:
    logging.basicConfig(level=settings.LOG_LEVEL)
    try:
        app = init_firebase()
        client = firestore_admin_v1.FirestoreAdminClient(credentials=app.credential.get_credential())
        created = create_indexes(client, settings.FIREBASE_PROJECT_ID, settings.CLINICS_COLLECTION)
    except (ConfigurationError, GoogleAPIError) as e:
        logger.error(f"Error creating indexes: {e}")
        return 1
    logger.info(f"All indexes in place ({created} created)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
