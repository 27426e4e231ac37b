"""
Middleware de FastAPI para correlation IDs y contexto de request.
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.logging.structured_logger import (
    clear_correlation_id,
    clear_request_context,
    set_correlation_id,
    set_request_context,
)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Propaga un correlation ID por request.

    Reutiliza el ``X-Correlation-ID`` recibido o genera uno nuevo, lo deja
    en el contexto de logging y lo devuelve en la respuesta junto con
    ``X-Request-ID`` y el tiempo de respuesta.
    """

    CORRELATION_ID_HEADER = "X-Correlation-ID"
    REQUEST_ID_HEADER = "X-Request-ID"
    RESPONSE_TIME_HEADER = "X-Response-Time-ms"

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        cid = set_correlation_id(request.headers.get(self.CORRELATION_ID_HEADER))
        set_request_context(
            method=request.method,
            path=request.url.path,
            client_ip=self._ip_cliente(request),
        )
        inicio = time.monotonic()

        try:
            response = await call_next(request)
            response.headers[self.CORRELATION_ID_HEADER] = cid
            response.headers[self.REQUEST_ID_HEADER] = cid
            duracion_ms = (time.monotonic() - inicio) * 1000
            response.headers[self.RESPONSE_TIME_HEADER] = f"{duracion_ms:.2f}"
            return response
        finally:
            clear_correlation_id()
            clear_request_context()

    def _ip_cliente(self, request: Request) -> str:
        # Wablas llega normalmente detrás de un proxy
        reenviado = request.headers.get("x-forwarded-for")
        if reenviado:
            return reenviado.split(",")[0].strip()
        if request.client:
            return request.client.host
        return "unknown"
