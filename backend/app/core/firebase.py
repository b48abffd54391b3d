"""Firebase Admin bootstrap - credentials, Firestore client, Storage bucket"""
import logging

import firebase_admin
from firebase_admin import credentials, firestore_async, storage

from app.core.config import settings
from app.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

TOKEN_URI = "https://oauth2.googleapis.com/token"


def _service_account_info() -> dict:
    missing = [
        name for name in ("FIREBASE_PROJECT_ID", "FIREBASE_CLIENT_EMAIL", "FIREBASE_PRIVATE_KEY")
        if not getattr(settings, name)
    ]
    if missing:
        raise ConfigurationError(
            f"Firebase configuration is missing: {', '.join(missing)}. "
            f"Please check your environment variables."
        )
    return {
        "type": "service_account",
        "project_id": settings.FIREBASE_PROJECT_ID,
        "client_email": settings.FIREBASE_CLIENT_EMAIL,
        "private_key": settings.FIREBASE_PRIVATE_KEY.replace("\\n", "\n"),
        "token_uri": TOKEN_URI,
    }


def init_firebase() -> firebase_admin.App:
    """Initialise the default Firebase app once. Raises ConfigurationError on missing credentials."""
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    cred = credentials.Certificate(_service_account_info())
    options = {"projectId": settings.FIREBASE_PROJECT_ID}
    if settings.FIREBASE_STORAGE_BUCKET:
        options["storageBucket"] = settings.FIREBASE_STORAGE_BUCKET
    app = firebase_admin.initialize_app(cred, options)
    logger.info(f"Firebase initialised for project {settings.FIREBASE_PROJECT_ID}")
    return app


def get_db():
    """FastAPI dependency - Firestore async client bound to the default app."""
    return firestore_async.client()


def get_bucket():
    if not settings.FIREBASE_STORAGE_BUCKET:
        raise ConfigurationError("FIREBASE_STORAGE_BUCKET is not set")
    return storage.bucket()
