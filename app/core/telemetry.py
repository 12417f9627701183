"""
OpenTelemetry instrumentation for the FastAPI shell and MongoDB driver.
Trace export is configured by the deployment environment.
"""

from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.pymongo import PymongoInstrumentor

from app.core.config import config
from app.core.logger import logger


def instrument_app(app):
    """
    Instrument a FastAPI application and PyMongo for automatic span creation.

    Args:
        app: FastAPI application instance
    """
    if not config.telemetry_enabled:
        logger.info("OpenTelemetry instrumentation disabled")
        return

    try:
        FastAPIInstrumentor.instrument_app(app)
        PymongoInstrumentor().instrument()
        logger.info("OpenTelemetry instrumentation complete")
    except Exception as e:
        # Tracing must never prevent the service from starting
        logger.error(f"Failed to instrument application: {e}", error=e)
