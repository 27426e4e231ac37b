"""Plantillas de mensajes enviados al usuario."""
