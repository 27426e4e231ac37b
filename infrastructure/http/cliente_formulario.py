"""
Cliente HTTP para el endpoint que recibe los formularios de registro
(normalmente un Apps Script que escribe en una hoja de cálculo).
"""

import logging
from typing import Optional

import httpx

from core.exceptions import ErrorEnvioFormulario
from models.formulario import EnvioFormulario

logger = logging.getLogger(__name__)


class ClienteFormulario:
    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url
        self.timeout = timeout
        # El Apps Script responde con una redirección hacia el resultado
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
        )

    async def enviar(self, envio: EnvioFormulario) -> None:
        """
        Reenvía un formulario completo.

        Args:
            envio: Registro plano con los datos del formulario

        Raises:
            ErrorEnvioFormulario: Error de transporte o respuesta no 2xx
        """
        try:
            respuesta = await self._client.post(self.url, json=envio.to_dict())
        except httpx.HTTPError as exc:
            logger.error(f"❌ Error reenviando formulario de {envio.nomor}: {exc}")
            raise ErrorEnvioFormulario(envio.nomor) from exc

        if not respuesta.is_success:
            logger.error(
                f"❌ Endpoint de formularios respondió {respuesta.status_code} "
                f"para {envio.nomor}"
            )
            raise ErrorEnvioFormulario(envio.nomor, respuesta.status_code)

        logger.info(f"✅ Formulario de {envio.nomor} reenviado")

    async def close(self) -> None:
        """Cerrar cliente HTTP compartido."""
        await self._client.aclose()
