"""Excepciones personalizadas del dominio para el bot de consultas."""

from typing import Any, Optional


class ErrorSesionCorrupta(Exception):
    """El valor almacenado no se puede interpretar como una sesión válida."""

    def __init__(self, telefono: str, valor: Any = None, motivo: Optional[str] = None):
        detalle = f": {motivo}" if motivo else ""
        super().__init__(f"Corrupt session for {telefono}{detalle}")
        self.telefono = telefono
        self.valor = valor
        self.motivo = motivo


class ErrorEnvioFormulario(Exception):
    """Error al reenviar un formulario al endpoint de destino."""

    def __init__(self, telefono: str, status_code: Optional[int] = None):
        if status_code is not None:
            super().__init__(f"Form for {telefono} rejected with status {status_code}")
        else:
            super().__init__(f"Form for {telefono} could not be forwarded")
        self.telefono = telefono
        self.status_code = status_code
