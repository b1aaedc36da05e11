"""
MindGuard FastAPI Application

Main entry point for the MindGuard API: daily stress check-ins,
engagement streaks and advice chat.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from common.database import MongoDB, set_main_database, get_main_database
from common.utils import success_response, error_response
from common.utils.exceptions import APIException

from mindguard.config import settings
from mindguard.dependencies import (
    init_all_services,
    build_ai_provider,
    get_advice_chat_service,
)
from mindguard.routers import checkin_router, chat_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Database Instance
# =============================================================================
main_db = MongoDB()


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Connects to MongoDB and initializes services on startup.
    """
    logger.info("Starting MindGuard API...")
    settings.validate_required()

    await main_db.connect(
        uri=settings.MONGODB_URI,
        database_name=settings.MONGODB_DATABASE,
    )
    set_main_database(main_db)

    init_all_services(
        db=main_db.db,
        settings=settings,
        ai_provider=build_ai_provider(settings),
    )
    logger.info("MindGuard API started successfully")

    yield

    logger.info("Shutting down MindGuard API...")
    await main_db.disconnect()


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="MindGuard API",
    description="Daily stress assessment and engagement tracking",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

# =============================================================================
# CORS Middleware
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Error Handlers
# =============================================================================
@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(error_response(exc.message, code=exc.code, details=exc.details)),
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder(
            error_response("Validation error", code="VALIDATION_ERROR", errors=exc.errors())
        ),
    )


# =============================================================================
# Include Routers (all under /api prefix)
# =============================================================================
API_PREFIX = "/api"

app.include_router(checkin_router, prefix=API_PREFIX, tags=["Check-in"])
app.include_router(chat_router, prefix=API_PREFIX, tags=["Chat"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Returns the status of the API, the database connection and advice chat.
    """
    return success_response({
        "status": "ok",
        "version": "1.0.0",
        "database": get_main_database().is_connected,
        "adviceChat": get_advice_chat_service().is_available,
    })


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
