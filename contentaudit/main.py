"""
FastAPI application entry point for ContentAudit.
"""
import logging

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contentaudit.api.v1.router import api_router
from contentaudit.config import settings
from contentaudit.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

health_router = APIRouter(tags=["Health"])


@health_router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=settings.VERSION)


@health_router.get(f"{settings.API_V1_STR}/health", response_model=HealthResponse)
async def api_health_check():
    """API health check endpoint."""
    return HealthResponse(status="healthy", version=settings.VERSION)


def create_app() -> FastAPI:
    logging.basicConfig(level=settings.LOG_LEVEL)

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Content-quality audits for documentation pages.",
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        docs_url=f"{settings.API_V1_STR}/docs",
        redoc_url=f"{settings.API_V1_STR}/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health_router)
    application.include_router(api_router, prefix=settings.API_V1_STR)

    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} ready ({settings.ENVIRONMENT})")
    return application


app = create_app()
