"""
Modelos de estados para el flujo conversacional.

Este módulo define los schemas validados con Pydantic para garantizar
la integridad de las sesiones persistidas en Redis.
"""

from .sesion import (
    EligiendoMetodo,
    EstadoConversacion,
    Layanan,
    LlenandoFormulario,
    MetodoKonsultasi,
    ModoChat,
    Sesion,
    SinSesion,
    sesion_desde_registro,
)
from .transiciones import (
    TRANSICIONES_VALIDAS,
    puede_transicionar,
)

__all__ = [
    # Estados y catálogos
    "EstadoConversacion",
    "Layanan",
    "MetodoKonsultasi",
    # Variantes de sesión
    "Sesion",
    "SinSesion",
    "EligiendoMetodo",
    "LlenandoFormulario",
    "ModoChat",
    "sesion_desde_registro",
    # Transiciones
    "TRANSICIONES_VALIDAS",
    "puede_transicionar",
]
