"""
Clasificador de comandos de la conversación.

Convierte el texto recibido y la sesión actual en una intención explícita.
Es una función pura: no accede a Redis ni a la red, por lo que las reglas de
la máquina de estados se pueden probar sin mocks.

Las reglas se evalúan en orden de prioridad y gana la primera que coincide:
1. Saludo o comando de reinicio (desde cualquier estado)
2. Selección de método (eligiendo método, "1"/"2")
3. Envío de formulario (llenando formulario)
4. Mensaje de chat (modo chat)
5. Selección de servicio (sin sesión, "1".."4" o palabra clave)
6. Entrada directa al chat (sin sesión, "5" o "chat")
7. Comando no reconocido
"""

from dataclasses import dataclass
from typing import Optional, Union

from flows.configuracion import (
    LAYANAN_POR_OPCION,
    OPCION_CHAT,
    OPCIONES_METODO,
    PALABRA_CHAT,
    PALABRAS_CLAVE_LAYANAN,
    SALUDOS_REINICIO,
)
from flows.formulario import parsear_formulario
from models.estados import (
    EligiendoMetodo,
    Layanan,
    LlenandoFormulario,
    MetodoKonsultasi,
    ModoChat,
    Sesion,
    SinSesion,
)
from models.formulario import DatosFormulario


@dataclass(frozen=True)
class Reiniciar:
    """Volver al menú principal limpiando la sesión."""


@dataclass(frozen=True)
class ElegirMetodo:
    metodo: MetodoKonsultasi


@dataclass(frozen=True)
class FormularioValido:
    datos: DatosFormulario


@dataclass(frozen=True)
class FormularioInvalido:
    """El texto no respeta el formato de cuatro campos."""


@dataclass(frozen=True)
class MensajeChat:
    """Mensaje libre dentro del modo chat; no genera respuesta."""


@dataclass(frozen=True)
class ElegirLayanan:
    layanan: Layanan


@dataclass(frozen=True)
class IniciarChat:
    pass


@dataclass(frozen=True)
class NoReconocido:
    pass


Intencion = Union[
    Reiniciar,
    ElegirMetodo,
    FormularioValido,
    FormularioInvalido,
    MensajeChat,
    ElegirLayanan,
    IniciarChat,
    NoReconocido,
]


def normalizar_comando(texto: str) -> str:
    return (texto or "").strip().lower()


def resolver_layanan(comando: str) -> Optional[Layanan]:
    """Resuelve el servicio por número exacto o por palabra clave."""
    if comando in LAYANAN_POR_OPCION:
        return LAYANAN_POR_OPCION[comando]
    for layanan, palabras in PALABRAS_CLAVE_LAYANAN.items():
        if any(palabra in comando for palabra in palabras):
            return layanan
    return None


def es_entrada_chat(comando: str) -> bool:
    return comando == OPCION_CHAT or PALABRA_CHAT in comando


def clasificar_intencion(texto: str, sesion: Sesion) -> Intencion:
    """
    Clasifica un mensaje según la sesión actual.

    Args:
        texto: Mensaje crudo del usuario
        sesion: Variante de sesión leída del almacén

    Returns:
        La intención correspondiente a la primera regla que coincide
    """
    comando = normalizar_comando(texto)

    if comando in SALUDOS_REINICIO:
        return Reiniciar()

    if isinstance(sesion, EligiendoMetodo) and comando in OPCIONES_METODO:
        return ElegirMetodo(metodo=OPCIONES_METODO[comando])

    if isinstance(sesion, LlenandoFormulario):
        datos = parsear_formulario(texto)
        if datos is None:
            return FormularioInvalido()
        return FormularioValido(datos=datos)

    if isinstance(sesion, ModoChat):
        return MensajeChat()

    if isinstance(sesion, SinSesion):
        layanan = resolver_layanan(comando)
        if layanan is not None:
            return ElegirLayanan(layanan=layanan)
        if es_entrada_chat(comando):
            return IniciarChat()

    return NoReconocido()
