import asyncio
import json
import logging
from typing import Any, Optional

import redis.asyncio as redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

logger = logging.getLogger(__name__)


class ClienteRedis:
    """
    Cliente asíncrono de Redis para el almacén de sesiones.

    No mantiene copia local de los datos: si Redis no responde, las
    operaciones lanzan ``ConnectionError`` y el repositorio decide qué hacer.
    """

    def __init__(self, url: str, socket_timeout: float = 5.0, max_retries: int = 3):
        self.url = url
        self.socket_timeout = socket_timeout
        self.redis_client: Optional[redis.Redis] = None
        self._connected = False
        self._max_retries = max_retries

    @property
    def conectado(self) -> bool:
        return self._connected and self.redis_client is not None

    async def connect(self, reintentos: Optional[int] = None) -> bool:
        """
        Conectar a Redis con reintentos y backoff lineal.

        Args:
            reintentos: Intentos a realizar; por defecto ``max_retries``

        Returns:
            True si la conexión quedó establecida
        """
        intentos = reintentos or self._max_retries
        for attempt in range(intentos):
            # El cliente anterior (caído o de un intento fallido) se cierra antes de crear otro
            await self._cerrar_cliente()
            try:
                self.redis_client = redis.from_url(
                    self.url,
                    decode_responses=True,
                    socket_timeout=self.socket_timeout,
                    socket_connect_timeout=self.socket_timeout,
                )
                await self.redis_client.ping()
                self._connected = True
                logger.info("✅ Conectado a Redis")
                return True
            except Exception as e:
                self._connected = False
                logger.warning(
                    f"⚠️ Intento {attempt + 1}/{intentos} - Error conectando a Redis: {e}"
                )
                if attempt < intentos - 1:
                    await asyncio.sleep(1 * (attempt + 1))

        logger.error(f"❌ No se pudo conectar a Redis después de {intentos} intentos")
        return False

    async def _cerrar_cliente(self) -> bool:
        if self.redis_client is None:
            return False
        try:
            await self.redis_client.aclose()
            return True
        except Exception as e:
            logger.warning(f"⚠️ Error cerrando cliente de Redis: {e}")
            return False
        finally:
            self.redis_client = None
            self._connected = False

    async def disconnect(self):
        """Desconectar de Redis"""
        if await self._cerrar_cliente():
            logger.info("🔌 Desconectado de Redis")

    async def _cliente(self) -> redis.Redis:
        if not self.conectado:
            # En el camino de una petición solo se intenta una vez
            if not await self.connect(reintentos=1):
                raise ConnectionError("Redis no disponible")
        return self.redis_client

    async def _ejecutar(self, operacion: str, llamada):
        cliente = await self._cliente()
        try:
            return await llamada(cliente)
        except (RedisConnectionError, RedisTimeoutError) as e:
            self._connected = False
            logger.warning(f"⚠️ Redis no respondió en {operacion}: {e}")
            raise ConnectionError(f"Redis no disponible en {operacion}") from e

    async def set(self, key: str, value: Any, expire: Optional[int] = None):
        """Guardar valor con TTL opcional; dicts y listas se serializan a JSON."""
        if isinstance(value, (dict, list)):
            value = json.dumps(value)
        await self._ejecutar("set", lambda c: c.set(key, value, ex=expire))
        logger.debug(f"💾 Guardado en Redis: {key}")

    async def get(self, key: str) -> Optional[Any]:
        """
        Obtener valor de Redis.

        Returns:
            El JSON decodificado, el texto crudo si no es JSON o es "null",
            o None si la clave no existe
        """
        value = await self._ejecutar("get", lambda c: c.get(key))
        if value is None:
            return None
        try:
            decodificado = json.loads(value)
        except json.JSONDecodeError:
            return value
        # Un "null" almacenado no debe confundirse con una clave inexistente
        return value if decodificado is None else decodificado

    async def delete(self, key: str):
        await self._ejecutar("delete", lambda c: c.delete(key))
        logger.debug(f"🗑️ Eliminado de Redis: {key}")

    async def ping(self) -> bool:
        """True si Redis responde; nunca lanza."""
        try:
            return bool(await self._ejecutar("ping", lambda c: c.ping()))
        except Exception as e:
            logger.debug(f"Ping a Redis fallido: {e}")
            return False
