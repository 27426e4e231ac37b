"""Mensajes agrupados por etapa de la conversación."""

from .chat import mensaje_bienvenida_chat
from .formulario import (
    mensaje_formulario_invalido,
    mensaje_instrucciones_formulario,
    mensaje_registro_exitoso,
    mensaje_registro_fallido,
)
from .menu import (
    MENU_LIST_TEXT,
    mensaje_bienvenida,
    mensaje_comando_no_reconocido,
)
from .metodo import mensaje_elegir_metodo

__all__ = [
    "MENU_LIST_TEXT",
    "mensaje_bienvenida",
    "mensaje_comando_no_reconocido",
    "mensaje_elegir_metodo",
    "mensaje_instrucciones_formulario",
    "mensaje_formulario_invalido",
    "mensaje_registro_exitoso",
    "mensaje_registro_fallido",
    "mensaje_bienvenida_chat",
]
