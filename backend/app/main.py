import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.owner import clinics as owner_clinics
from app.api.public import clinics as public_clinics
from app.api.public import countries as public_countries
from app.core.config import settings
from app.core.exceptions import (
    AuthorizationError,
    ConfigurationError,
    ForbiddenError,
    NotFoundError,
    ProviderError,
)
from app.core.firebase import init_firebase

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # missing credentials stop the process here
    init_firebase()
    yield

app = FastAPI(
    title="Clinic Directory API",
    description="Clinic listings backed by Firebase",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Owner routes: Firebase ID token required (per-endpoint Depends)
app.include_router(owner_clinics.router, prefix="/api/v1")

# Public routes: no auth
app.include_router(public_clinics.router, prefix="/api/v1")
app.include_router(public_countries.router, prefix="/api/v1")


# ── Domain error → HTTP ──────────────────────────────────────────
_STATUS_BY_ERROR = [
    (NotFoundError, 404),
    (ForbiddenError, 403),
    (AuthorizationError, 401),
    (ProviderError, 502),
    (ConfigurationError, 500),
]


def _register(error_cls: type[Exception], status_code: int) -> None:
    @app.exception_handler(error_cls)
    async def handler(request: Request, exc: Exception):
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})


for _error_cls, _status_code in _STATUS_BY_ERROR:
    _register(_error_cls, _status_code)


@app.get("/health")
async def health():
    return {"status": "ok", "env": settings.APP_ENV}
