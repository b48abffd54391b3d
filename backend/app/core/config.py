from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: list[str] = ["http://localhost:5173"]

    # Firebase - service account for the Admin SDK
    FIREBASE_PROJECT_ID: str = ""
    FIREBASE_CLIENT_EMAIL: str = ""
    FIREBASE_PRIVATE_KEY: str = ""  # single line in .env, newlines escaped as \n
    FIREBASE_STORAGE_BUCKET: str = ""

    # Firestore
    CLINICS_COLLECTION: str = "clinics"
    PUBLISHED_FETCH_LIMIT: int = 50

    # Images
    MAX_IMAGE_BYTES: int = 5 * 1024 * 1024


settings = Settings()
