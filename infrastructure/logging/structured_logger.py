"""
Logging estructurado con correlation IDs.

Cada webhook se procesa con su propio correlation ID y un contexto de request
(método, ruta, teléfono del remitente) guardados en ``ContextVar``; los
formatters los agregan a cada línea sin que los módulos tengan que pasarlos.
"""

import json
import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
request_context: ContextVar[Optional[Dict[str, Any]]] = ContextVar(
    "request_context", default=None
)

# Atributos propios de LogRecord; el resto llega vía ``extra=``
_ATRIBUTOS_RECORD = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

# Loggers de terceros demasiado verbosos en INFO
_LOGGERS_RUIDOSOS = ("httpx", "httpcore", "uvicorn.access")


def get_correlation_id() -> Optional[str]:
    return correlation_id.get()


def set_correlation_id(cid: Optional[str] = None) -> str:
    """
    Establece un correlation ID en el contexto.

    Args:
        cid: ID recibido o None para generar uno nuevo

    Returns:
        El correlation ID establecido
    """
    cid = cid or str(uuid.uuid4())
    correlation_id.set(cid)
    return cid


def clear_correlation_id() -> None:
    correlation_id.set(None)


def get_request_context() -> Dict[str, Any]:
    return dict(request_context.get() or {})


def set_request_context(**kwargs) -> None:
    """Agrega pares clave-valor al contexto de la request actual."""
    contexto = get_request_context()
    contexto.update(kwargs)
    request_context.set(contexto)


def clear_request_context() -> None:
    request_context.set(None)


def _contexto_visible() -> Dict[str, Any]:
    return {k: v for k, v in get_request_context().items() if v is not None}


class StructuredFormatter(logging.Formatter):
    """Formatter que emite una línea JSON por registro."""

    def __init__(self, service_name: str = "klinik-konsultasi-bot"):
        super().__init__()
        self.service_name = service_name

    def _campos_extra(self, record: logging.LogRecord) -> Dict[str, Any]:
        return {
            clave: valor
            for clave, valor in record.__dict__.items()
            if clave not in _ATRIBUTOS_RECORD
        }

    def format(self, record: logging.LogRecord) -> str:
        datos: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "location": {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            },
        }

        cid = get_correlation_id()
        if cid:
            datos["correlation_id"] = cid

        contexto = _contexto_visible()
        if contexto:
            datos["context"] = contexto

        extra = self._campos_extra(record)
        if extra:
            datos["extra"] = extra

        if record.exc_info:
            datos["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            datos["stack_trace"] = self.formatStack(record.stack_info)

        return json.dumps(datos, ensure_ascii=False, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Formatter para desarrollo local."""

    COLORS: Mapping[str, str] = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        momento = datetime.fromtimestamp(record.created, timezone.utc)
        nivel = f"{record.levelname:8}"
        if self.use_colors:
            nivel = f"{self.COLORS.get(record.levelname, '')}{nivel}{self.RESET}"

        cid = get_correlation_id()
        prefijo_cid = f"[{cid[:8]}] " if cid else ""

        linea = (
            f"{momento:%Y-%m-%d %H:%M:%S} {nivel} {prefijo_cid}"
            f"{record.name}: {record.getMessage()}"
        )

        contexto = _contexto_visible()
        if contexto:
            linea += " | " + " | ".join(f"{k}={v}" for k, v in contexto.items())

        if record.exc_info:
            linea += f"\n{self.formatException(record.exc_info)}"
        return linea


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
    service_name: str = "klinik-konsultasi-bot",
) -> None:
    """
    Configura el root logger con un único handler a stdout.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR)
        json_output: True para JSON, False para texto legible
        service_name: Nombre del servicio incluido en cada línea JSON
    """
    if json_output:
        formatter: logging.Formatter = StructuredFormatter(service_name=service_name)
    else:
        formatter = HumanReadableFormatter(use_colors=sys.stdout.isatty())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for existente in root_logger.handlers[:]:
        root_logger.removeHandler(existente)
    root_logger.addHandler(handler)

    for nombre in _LOGGERS_RUIDOSOS:
        logging.getLogger(nombre).setLevel(logging.WARNING)
