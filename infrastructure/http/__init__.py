"""Clientes HTTP hacia servicios externos."""
from .cliente_formulario import ClienteFormulario
from .cliente_wablas import ClienteWablas

__all__ = ["ClienteFormulario", "ClienteWablas"]
