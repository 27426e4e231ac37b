# Persistence infrastructure module
from .cliente_redis import ClienteRedis
from .repositorio_sesion import RepositorioSesionRedis

__all__ = [
    "ClienteRedis",
    "RepositorioSesionRedis",
]
