"""
Orquestador Conversacional - Coordina el flujo de consultas por WhatsApp

Recibe cada entrega del webhook, lee la sesión del remitente, obtiene la
decisión de la máquina de estados y la aplica: reenvío del formulario,
escritura de la sesión y respuesta por Wablas.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from config.configuracion import ConfiguracionServicio
from core.exceptions import ErrorEnvioFormulario
from flows.clasificador import clasificar_intencion
from flows.decisor import Decision, EfectoSesion, decidir
from flows.pre_enrutador import filtrar_evento
from infrastructure.http import ClienteFormulario, ClienteWablas
from infrastructure.logging import set_request_context
from infrastructure.persistencia import RepositorioSesionRedis
from models.estados import puede_transicionar
from models.eventos import EventoEntrante


def _ahora_utc() -> datetime:
    return datetime.now(timezone.utc)


class OrquestadorConversacional:
    """
    Orquesta el flujo de conversación de la clínica de consultas.

    Responsabilidades:
    - Filtrar las entregas que no requieren respuesta
    - Coordinar clasificación y decisión
    - Reenviar formularios completos
    - Persistir la sesión (como máximo una escritura por mensaje)
    - Responder por WhatsApp
    """

    def __init__(
        self,
        *,
        repositorio_sesion: RepositorioSesionRedis,
        cliente_wablas: ClienteWablas,
        configuracion: ConfiguracionServicio,
        cliente_formulario: Optional[ClienteFormulario] = None,
        reloj: Optional[Callable[[], datetime]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Inicializar orquestador con dependencias.

        Args:
            repositorio_sesion: Almacén de sesiones por teléfono
            cliente_wablas: Cliente para enviar respuestas
            configuracion: Configuración del servicio (filtros del webhook)
            cliente_formulario: Destino de formularios; None omite el reenvío
            reloj: Fuente de la hora usada en los formularios
            logger: Logger opcional (usa __name__ si None)
        """
        self.repositorio_sesion = repositorio_sesion
        self.cliente_wablas = cliente_wablas
        self.cliente_formulario = cliente_formulario
        self.configuracion = configuracion
        self.reloj = reloj or _ahora_utc
        self.logger = logger or logging.getLogger(__name__)

    async def procesar_payload(self, carga: Any) -> Optional[Decision]:
        """
        Procesa el cuerpo de una entrega del webhook.

        Nunca lanza: cualquier error se registra para que el webhook pueda
        responder 200 a Wablas.

        Returns:
            La decisión aplicada, o None si el evento se descartó o falló
        """
        try:
            evento = filtrar_evento(carga, self.configuracion)
            if evento is None:
                return None
            return await self.procesar_evento(evento)
        except Exception as e:
            self.logger.exception(f"❌ Error procesando webhook: {e}")
            return None

    async def procesar_evento(self, evento: EventoEntrante) -> Decision:
        """
        Aplica la máquina de estados a un mensaje ya validado.

        Args:
            evento: Mensaje de texto de un remitente

        Returns:
            La decisión aplicada
        """
        telefono = evento.telefono
        set_request_context(telefono=telefono)
        self.logger.info(f"📥 Mensaje de {telefono}: {evento.mensaje[:80]!r}")

        sesion = await self.repositorio_sesion.obtener(telefono)
        intencion = clasificar_intencion(evento.mensaje, sesion)
        decision = decidir(intencion, sesion, telefono=telefono, ahora=self.reloj())
        self.logger.debug(
            f"Intención {type(intencion).__name__} en step={sesion.estado.value}"
        )

        if decision.formulario is not None:
            decision = await self._reenviar_formulario(telefono, decision)

        destino = decision.estado_destino(sesion.estado)
        if not puede_transicionar(sesion.estado, destino):
            self.logger.warning(
                f"⚠️ Transición inesperada para {telefono}: "
                f"{sesion.estado.value} -> {destino.value}"
            )

        await self._aplicar_efecto(telefono, decision)

        if decision.respuesta is None:
            self.logger.info(f"💬 Mensaje de chat de {telefono} sin respuesta automática")
        else:
            await self.cliente_wablas.enviar_texto(telefono, decision.respuesta)

        return decision

    async def _reenviar_formulario(self, telefono: str, decision: Decision) -> Decision:
        if self.cliente_formulario is None:
            self.logger.info(
                f"⚠️ Endpoint de formularios no configurado, registro de {telefono} no reenviado"
            )
            return decision

        try:
            await self.cliente_formulario.enviar(decision.formulario)
        except ErrorEnvioFormulario as e:
            self.logger.warning(f"⚠️ Formulario de {telefono} no registrado: {e}")
            return decision.al_fallar_envio()
        return decision

    async def _aplicar_efecto(self, telefono: str, decision: Decision) -> None:
        if decision.efecto == EfectoSesion.GUARDAR:
            await self.repositorio_sesion.guardar(telefono, decision.sesion)
        elif decision.efecto == EfectoSesion.ELIMINAR:
            await self.repositorio_sesion.resetear(telefono)
