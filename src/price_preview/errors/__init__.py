# 🚨 price_preview/errors/__init__.py
"""
🚨 Публічний фасад помилок: ієрархія винятків, коди причин і мапер.
"""

from .custom_errors import (
    AppError,
    ConfigurationError,
    ErrorCode,
    ItemNotFoundError,
    NetworkRequestError,
    ParsingError,
    PriceUnavailableError,
    RatesUnavailableError,
    UserVisibleError,
)
from .reason_codes import ReasonCode
from .reason_mapper import map_error_to_reason

__all__ = [
    "AppError",
    "ConfigurationError",
    "ErrorCode",
    "ItemNotFoundError",
    "NetworkRequestError",
    "ParsingError",
    "PriceUnavailableError",
    "RatesUnavailableError",
    "ReasonCode",
    "UserVisibleError",
    "map_error_to_reason",
]
