"""
Decisión de la máquina de estados.

Traduce una intención clasificada en una ``Decision``: qué responder, cómo
queda la sesión y si hay un formulario que reenviar. No ejecuta ninguna
operación de I/O; el orquestador aplica la decisión.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from flows.clasificador import (
    ElegirLayanan,
    ElegirMetodo,
    FormularioInvalido,
    FormularioValido,
    IniciarChat,
    Intencion,
    MensajeChat,
    Reiniciar,
)
from models.estados import (
    EligiendoMetodo,
    EstadoConversacion,
    LlenandoFormulario,
    ModoChat,
    Sesion,
)
from models.formulario import EnvioFormulario
from templates.mensajes import (
    mensaje_bienvenida,
    mensaje_bienvenida_chat,
    mensaje_comando_no_reconocido,
    mensaje_elegir_metodo,
    mensaje_formulario_invalido,
    mensaje_instrucciones_formulario,
    mensaje_registro_exitoso,
    mensaje_registro_fallido,
)


class EfectoSesion(str, Enum):
    """Operación sobre el almacén de sesiones (como máximo una por evento)."""

    CONSERVAR = "conservar"
    GUARDAR = "guardar"
    ELIMINAR = "eliminar"


@dataclass(frozen=True)
class Decision:
    """
    Resultado de procesar un mensaje.

    Attributes:
        respuesta: Texto a enviar al usuario, None para no responder
        efecto: Operación a aplicar sobre la sesión
        sesion: Nueva sesión cuando el efecto es GUARDAR
        formulario: Registro a reenviar antes de responder
        respuesta_si_falla: Respuesta alternativa si el reenvío falla; en ese
            caso la sesión se conserva sin cambios
    """

    respuesta: Optional[str] = None
    efecto: EfectoSesion = EfectoSesion.CONSERVAR
    sesion: Optional[Sesion] = None
    formulario: Optional[EnvioFormulario] = None
    respuesta_si_falla: Optional[str] = None

    def __post_init__(self) -> None:
        if self.efecto == EfectoSesion.GUARDAR and self.sesion is None:
            raise ValueError("El efecto GUARDAR requiere una sesión")

    def al_fallar_envio(self) -> "Decision":
        """Decisión a aplicar cuando el formulario no se pudo reenviar."""
        return replace(
            self,
            respuesta=self.respuesta_si_falla,
            efecto=EfectoSesion.CONSERVAR,
            sesion=None,
            formulario=None,
            respuesta_si_falla=None,
        )

    def estado_destino(self, actual: EstadoConversacion) -> EstadoConversacion:
        if self.efecto == EfectoSesion.GUARDAR:
            return self.sesion.estado
        if self.efecto == EfectoSesion.ELIMINAR:
            return EstadoConversacion.NONE
        return actual


def decidir(
    intencion: Intencion,
    sesion: Sesion,
    *,
    telefono: str,
    ahora: Optional[datetime] = None,
) -> Decision:
    """
    Decide la respuesta y el nuevo estado para una intención.

    Args:
        intencion: Resultado de ``clasificar_intencion``
        sesion: Sesión actual
        telefono: Número del remitente (va en el formulario reenviado)
        ahora: Marca de tiempo del formulario; por defecto la hora UTC actual

    Returns:
        Decision a aplicar por el orquestador
    """
    if isinstance(intencion, Reiniciar):
        return Decision(respuesta=mensaje_bienvenida(), efecto=EfectoSesion.ELIMINAR)

    if isinstance(intencion, ElegirMetodo) and isinstance(sesion, EligiendoMetodo):
        return Decision(
            respuesta=mensaje_instrucciones_formulario(intencion.metodo.value),
            efecto=EfectoSesion.GUARDAR,
            sesion=sesion.con_metodo(intencion.metodo),
        )

    if isinstance(intencion, FormularioInvalido):
        return Decision(respuesta=mensaje_formulario_invalido())

    if isinstance(intencion, FormularioValido) and isinstance(sesion, LlenandoFormulario):
        momento = ahora or datetime.now(timezone.utc)
        envio = EnvioFormulario(
            timestamp=momento.isoformat(),
            nomor=telefono,
            layanan=sesion.layanan,
            metode=sesion.metode,
            **intencion.datos.model_dump(),
        )
        return Decision(
            respuesta=mensaje_registro_exitoso(envio.to_dict()),
            efecto=EfectoSesion.ELIMINAR,
            formulario=envio,
            respuesta_si_falla=mensaje_registro_fallido(),
        )

    if isinstance(intencion, MensajeChat):
        return Decision()

    if isinstance(intencion, ElegirLayanan):
        nueva = EligiendoMetodo(layanan=intencion.layanan)
        return Decision(
            respuesta=mensaje_elegir_metodo(intencion.layanan.value),
            efecto=EfectoSesion.GUARDAR,
            sesion=nueva,
        )

    if isinstance(intencion, IniciarChat):
        return Decision(
            respuesta=mensaje_bienvenida_chat(),
            efecto=EfectoSesion.GUARDAR,
            sesion=ModoChat(),
        )

    # NoReconocido; el modo chat nunca llega aquí (siempre es MensajeChat)
    return Decision(respuesta=mensaje_comando_no_reconocido())
