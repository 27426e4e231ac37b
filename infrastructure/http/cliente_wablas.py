"""
Cliente HTTP para el gateway de WhatsApp Wablas.
"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class ClienteWablas:
    """Envía mensajes de texto por ``POST {base_url}/send-message``."""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str],
        secret_key: Optional[str],
        pie_mensaje: str = "",
        timeout: float = 15.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.secret_key = secret_key
        self.pie_mensaje = pie_mensaje
        self.timeout = timeout
        self._client = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @property
    def configurado(self) -> bool:
        return bool(self.api_key and self.secret_key)

    def agregar_pie(self, texto: str) -> str:
        """Agrega el pie configurado separado por una línea en blanco."""
        if not self.pie_mensaje:
            return texto
        return f"{texto}\n\n{self.pie_mensaje}"

    async def enviar_texto(self, telefono: str, texto: str) -> bool:
        """
        Envía un mensaje de texto a un teléfono.

        El envío se intenta una sola vez; los fallos se registran y no se
        propagan.

        Args:
            telefono: Número de destino
            texto: Mensaje sin pie

        Returns:
            True si Wablas aceptó el mensaje
        """
        if not self.configurado:
            logger.error("❌ Credenciales de Wablas no configuradas, mensaje no enviado")
            return False

        carga = {"data": [{"phone": telefono, "message": self.agregar_pie(texto)}]}
        try:
            respuesta = await self._client.post(
                f"{self.base_url}/send-message",
                json=carga,
                headers={"Authorization": f"{self.api_key}.{self.secret_key}"},
            )
            respuesta.raise_for_status()
            logger.info(f"📤 Mensaje enviado a {telefono}")
            return True

        except httpx.HTTPStatusError as e:
            logger.error(
                f"❌ Wablas rechazó mensaje para {telefono}: "
                f"{e.response.status_code} - {e.response.text[:200]}"
            )
            return False

        except httpx.TimeoutException:
            logger.error(f"⏰ Timeout enviando mensaje a {telefono}")
            return False

        except httpx.HTTPError as exc:
            logger.error(f"❌ Error de conexión con Wablas para {telefono}: {exc}")
            return False

    async def close(self) -> None:
        """Cerrar cliente HTTP compartido."""
        await self._client.aclose()
