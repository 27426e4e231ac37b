"""Extracción de los cuatro campos del formulario de registro."""

import re
from typing import Optional

from pydantic import ValidationError

from models.formulario import DatosFormulario

# Espacio horizontal: nunca cruza a la línea siguiente
_H = r"[^\S\n]*"

PATRON_FORMULARIO = re.compile(
    rf"^{_H}Nama{_H}:{_H}(?P<nama>\S[^\n]*)\n"
    rf"\s*Unit{_H}:{_H}(?P<unit>\S[^\n]*)\n"
    rf"\s*Jabatan{_H}:{_H}(?P<jabatan>\S[^\n]*)\n"
    rf"\s*Referensi{_H}Hari{_H}/{_H}Jam{_H}:{_H}(?P<waktu>\S[^\n]*)",
    re.IGNORECASE | re.MULTILINE,
)


def limpiar_texto_formulario(texto: str) -> str:
    return (texto or "").replace("\r", "").strip()


def parsear_formulario(texto: str) -> Optional[DatosFormulario]:
    """
    Interpreta el texto del usuario como formulario de registro.

    Las etiquetas ``Nama``, ``Unit``, ``Jabatan`` y ``Referensi Hari/Jam``
    deben aparecer en ese orden, cada una al inicio de su propia línea. Se
    toleran espacios alrededor de los dos puntos y líneas en blanco entre
    campos. Cada valor es el resto de la línea, sin espacios extremos.

    Args:
        texto: Mensaje crudo recibido

    Returns:
        DatosFormulario si el texto es válido, None en caso contrario
    """
    coincidencia = PATRON_FORMULARIO.search(limpiar_texto_formulario(texto))
    if not coincidencia:
        return None

    valores = {campo: valor.strip() for campo, valor in coincidencia.groupdict().items()}
    try:
        return DatosFormulario(**valores)
    except ValidationError:
        return None
