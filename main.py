"""
FastAPI Application - Inventory Rules Service
"""

# Load environment variables from .env file FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api import health
from app.core.config import config
from app.core.errors import ErrorResponse, error_response_handler, http_exception_handler
from app.core.logger import logger
from app.core.telemetry import instrument_app
from app.db.mongodb import connect_to_mongo, close_mongo_connection
from app.middleware import CorrelationIdMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Starting Inventory Rules Service...")
    await connect_to_mongo()

    logger.info(
        "Inventory Rules Service started successfully",
        metadata={
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.port
        }
    )

    yield

    logger.info("Shutting down Inventory Rules Service...")
    await close_mongo_connection()


app = FastAPI(
    title="Inventory Rules Service",
    description="Stock decision rules for normal, seasonal, expirable and flash-sale products",
    version=config.service_version,
    lifespan=lifespan
)

instrument_app(app)

app.add_exception_handler(ErrorResponse, error_response_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, lambda request, exc: JSONResponse(
    status_code=422,
    content={"error": "Validation error", "details": exc.errors()}
))

app.add_middleware(CorrelationIdMiddleware)

app.include_router(health.router, prefix="/api", tags=["health"])


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting {config.service_name} on port {config.port}")

    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.environment == "development"
    )
