"""
Módulo de logging estructurado.

Logs en JSON (o texto legible en desarrollo) con correlation IDs por request.
"""

from .middleware import CorrelationIdMiddleware
from .structured_logger import (
    HumanReadableFormatter,
    StructuredFormatter,
    clear_correlation_id,
    clear_request_context,
    configure_logging,
    get_correlation_id,
    get_request_context,
    set_correlation_id,
    set_request_context,
)

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
    "clear_correlation_id",
    "get_request_context",
    "set_request_context",
    "clear_request_context",
    "StructuredFormatter",
    "HumanReadableFormatter",
    "CorrelationIdMiddleware",
]
