"""Servicios de aplicación del bot."""
from .orquestador_conversacion import OrquestadorConversacional

__all__ = ["OrquestadorConversacional"]
