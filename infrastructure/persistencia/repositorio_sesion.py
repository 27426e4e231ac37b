"""Repositorio de sesiones de conversación en Redis."""

import logging
from typing import Any

from core.exceptions import ErrorSesionCorrupta
from models.estados import Sesion, SinSesion, sesion_desde_registro


class RepositorioSesionRedis:
    """
    Repositorio para la sesión de cada teléfono.

    Cada sesión vive bajo ``{prefijo}{telefono}`` con expiración. Las
    operaciones nunca propagan errores del almacén: una lectura fallida se
    interpreta como "sin sesión" y una escritura fallida solo se registra.
    """

    def __init__(self, redis_cliente, ttl_segundos: int = 1800, prefijo: str = "session:"):
        """
        Args:
            redis_cliente: Cliente con ``get``/``set``/``delete`` asíncronos
            ttl_segundos: Expiración de la sesión desde la última escritura
            prefijo: Prefijo de las claves en Redis
        """
        self.redis = redis_cliente
        self.ttl_segundos = ttl_segundos
        self.prefijo = prefijo
        self.logger = logging.getLogger(__name__)

    def clave(self, telefono: str) -> str:
        return f"{self.prefijo}{telefono}"

    def _interpretar(self, telefono: str, datos: Any) -> Sesion:
        if datos is not None and not isinstance(datos, dict):
            raise ErrorSesionCorrupta(telefono, datos, "el valor no es un objeto JSON")
        try:
            return sesion_desde_registro(datos)
        except ValueError as e:
            raise ErrorSesionCorrupta(telefono, datos, str(e)) from e

    async def obtener(self, telefono: str) -> Sesion:
        """
        Obtiene la sesión de un teléfono.

        Un registro ilegible se elimina y se trata como ausente.

        Args:
            telefono: Número de teléfono

        Returns:
            La variante de sesión, o SinSesion si no existe, expiró, está
            corrupta o Redis no está disponible
        """
        clave = self.clave(telefono)
        try:
            datos = await self.redis.get(clave)
        except Exception as e:
            self.logger.error(f"❌ Error obteniendo sesión para {telefono}: {e}")
            self.logger.warning(f"⚠️ Retornando sesión vacía para {telefono}")
            return SinSesion()

        try:
            sesion = self._interpretar(telefono, datos)
        except ErrorSesionCorrupta as e:
            self.logger.warning(f"⚠️ Sesión corrupta para {telefono}, eliminando: {e.motivo}")
            await self.resetear(telefono)
            return SinSesion()

        self.logger.info(f"📖 Get session para {telefono}: step={sesion.estado.value}")
        return sesion

    async def guardar(self, telefono: str, sesion: Sesion) -> None:
        """
        Guarda la sesión con la expiración configurada.

        Guardar ``SinSesion`` equivale a eliminar el registro.
        """
        if isinstance(sesion, SinSesion):
            await self.resetear(telefono)
            return

        try:
            self.logger.info(f"💾 Set session para {telefono}: step={sesion.estado.value}")
            await self.redis.set(self.clave(telefono), sesion.to_dict(), expire=self.ttl_segundos)
        except Exception as e:
            self.logger.error(f"❌ Error guardando sesión para {telefono}: {e}")
            self.logger.warning(f"⚠️ Sesión no guardada para {telefono}")

    async def resetear(self, telefono: str) -> None:
        """Elimina la sesión de un teléfono."""
        try:
            self.logger.info(f"🗑️ Reset session para {telefono}")
            await self.redis.delete(self.clave(telefono))
        except Exception as e:
            self.logger.error(f"❌ Error reseteando sesión para {telefono}: {e}")
            self.logger.warning(f"⚠️ Sesión no reseteada para {telefono}")
