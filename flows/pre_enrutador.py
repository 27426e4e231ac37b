"""Pre-enrutador: valida la carga del webhook y descarta lo que no se atiende."""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError

from config.configuracion import ConfiguracionServicio
from flows.configuracion import MARCADOR_MENSAJE_ESTADO
from models.eventos import EventoEntrante

logger = logging.getLogger(__name__)


def _numeros_iguales(a: Optional[str], b: Optional[str]) -> bool:
    if not a or not b:
        return False
    return a.strip().lstrip("+") == b.strip().lstrip("+")


def filtrar_evento(
    carga: Any,
    configuracion: ConfiguracionServicio,
) -> Optional[EventoEntrante]:
    """
    Convierte la carga del webhook en un evento procesable.

    Retorna None (salida temprana, sin tocar la sesión) cuando:
        - la carga no es un objeto o no trae ``phone``
        - el mensaje fue enviado por la propia cuenta del bot
        - el remitente es el número del bot
        - el texto es un eco de estado del gateway
        - el mensaje está vacío o no es de texto
        - faltan las credenciales de Wablas

    Args:
        carga: Cuerpo JSON ya decodificado
        configuracion: Configuración del servicio

    Returns:
        EventoEntrante o None si el evento debe descartarse
    """
    if not isinstance(carga, dict):
        logger.info("✋ Payload ignorado: no es un objeto JSON")
        return None

    try:
        evento = EventoEntrante.model_validate(carga)
    except ValidationError as exc:
        logger.info(f"✋ Payload ignorado: {exc.error_count()} campos inválidos")
        return None

    if evento.es_propio:
        logger.debug(f"✋ Mensaje propio ignorado: {evento.telefono}")
        return None

    if _numeros_iguales(evento.telefono, configuracion.wablas_phone_number):
        logger.debug("✋ Mensaje del número del bot ignorado")
        return None

    if MARCADOR_MENSAJE_ESTADO in evento.mensaje:
        logger.debug(f"✋ Eco de estado ignorado de {evento.telefono}")
        return None

    if not evento.mensaje.strip() or evento.tipo_mensaje != "text":
        logger.debug(
            f"✋ Mensaje vacío o no textual ignorado de {evento.telefono} "
            f"(tipo={evento.tipo_mensaje})"
        )
        return None

    if not configuracion.wablas_configurado:
        logger.error("❌ Credenciales de Wablas no configuradas, evento descartado")
        return None

    return evento
