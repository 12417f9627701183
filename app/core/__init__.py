"""
Core module initialization
"""

from .config import config
from .errors import ErrorResponse, ErrorResponseModel, InvalidProductError
from .logger import logger

__all__ = [
    "config",
    "ErrorResponse",
    "ErrorResponseModel",
    "InvalidProductError",
    "logger",
]
