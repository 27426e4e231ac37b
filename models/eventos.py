"""Modelo del evento entrante enviado por el webhook de Wablas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Valores que Wablas usa para marcar mensajes enviados por la propia cuenta
_VALORES_VERDADEROS = {"true", "1"}


class EventoEntrante(BaseModel):
    """
    Una entrega del webhook: un único mensaje de un remitente.

    Los nombres de campo del gateway se aceptan como alias; los campos
    desconocidos se ignoran.
    """

    telefono: str = Field(..., alias="phone", min_length=1)
    mensaje: str = Field(default="", alias="message")
    tipo_mensaje: str = Field(default="text", alias="messageType")
    es_propio: bool = Field(default=False, alias="isFromMe")
    nombre: str = Field(default="", alias="pushName")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("telefono", mode="before")
    @classmethod
    def normalizar_telefono(cls, v: Any) -> Any:
        if v is None:
            return v
        return str(v).strip()

    @field_validator("mensaje", "nombre", mode="before")
    @classmethod
    def texto_o_vacio(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("tipo_mensaje", mode="before")
    @classmethod
    def tipo_por_defecto(cls, v: Any) -> str:
        return str(v) if v else "text"

    @field_validator("es_propio", mode="before")
    @classmethod
    def interpretar_es_propio(cls, v: Any) -> bool:
        if isinstance(v, bool):
            return v
        if isinstance(v, (int, float)):
            return v == 1
        if isinstance(v, str):
            return v.strip().lower() in _VALORES_VERDADEROS
        return False
