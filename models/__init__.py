"""Modelos de datos del bot: sesión, evento entrante y formulario."""

from .eventos import EventoEntrante
from .formulario import DatosFormulario, EnvioFormulario

__all__ = ["EventoEntrante", "DatosFormulario", "EnvioFormulario"]
