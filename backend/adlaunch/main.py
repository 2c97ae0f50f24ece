"""
App Ads Launcher — FastAPI Backend
Registers mobile apps and campaigns in a Supabase REST datastore and
pushes campaigns to Google Ads.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from adlaunch.config import get_settings
from adlaunch.datastore import SupabaseREST
from adlaunch.dependencies import get_ads_client, get_datastore
from adlaunch.errors import ApiError, BadRequestError, SERVER_ERROR_MESSAGE
from adlaunch.google_ads_client import GoogleAdsClient
from adlaunch.routers import apps, campaigns, dashboard, google_ads
from adlaunch.utils import envelope, safe_error_detail

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting App Ads Launcher...")
    if not settings.supabase_url:
        logger.warning("SUPABASE_URL is empty; datastore requests will fail until it is configured.")
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title="App Ads Launcher",
    description="Mobile app registry and Google Ads campaign launcher",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Error envelope ────────────────────────────────────────────────────

@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return envelope(exc.status_code, error=exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Routing errors (404 unknown path, 405 wrong method) in the envelope."""
    response = envelope(exc.status_code, error=str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return envelope(BadRequestError.status_code, error=BadRequestError().message)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    return envelope(500, error=safe_error_detail(exc, SERVER_ERROR_MESSAGE))


# ── Register Routers ─────────────────────────────────────────────────
app.include_router(apps.router, prefix="/api/apps", tags=["Apps"])
app.include_router(campaigns.router, prefix="/api/campaigns", tags=["Campaigns"])
app.include_router(google_ads.router, prefix="/api/google-ads", tags=["Google Ads"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])


@app.get("/api/health")
async def health_check(
    datastore: SupabaseREST = Depends(get_datastore),
    ads_client: GoogleAdsClient = Depends(get_ads_client),
):
    datastore_ok = await datastore.check_connection()
    return {
        "status": "healthy" if datastore_ok else "degraded",
        "service": "App Ads Launcher",
        "datastore": "connected" if datastore_ok else "disconnected",
        "google_ads": "configured" if ads_client.is_configured else "not_configured",
    }
