"""
Shared pytest fixtures for the consultation bot tests.

This module provides fixtures for:
- An in-memory Redis double with key expiry driven by a fake clock
- Recording doubles for the Wablas sender and the form sink
- Test data factories for payloads and sessions
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import pytest

from config.configuracion import ConfiguracionServicio
from core.exceptions import ErrorEnvioFormulario
from infrastructure.persistencia.repositorio_sesion import RepositorioSesionRedis
from models.estados import (
    EligiendoMetodo,
    Layanan,
    LlenandoFormulario,
    MetodoKonsultasi,
    ModoChat,
)
from models.formulario import EnvioFormulario
from services.orquestador_conversacion import OrquestadorConversacional

TELEFONO = "6281234567890"
NUMERO_BOT = "6289999999999"

FORMULARIO_VALIDO = (
    "Nama: Budi\n"
    "Unit: Itjen\n"
    "Jabatan: Auditor\n"
    "Referensi Hari/Jam: Senin 10:00"
)


# ============================================================
# FAKE CLOCK + STORE
# ============================================================


class RelojFalso:
    """Monotonic clock that only moves when the test says so."""

    def __init__(self, inicio: float = 1_000_000.0):
        self.ahora = inicio

    def __call__(self) -> float:
        return self.ahora

    def avanzar(self, segundos: float) -> None:
        self.ahora += segundos


class MockRedis:
    """
    In-memory stand-in for ClienteRedis.

    Values are stored as JSON strings and decoded on read, like the real
    client. Keys written with ``expire`` vanish once the clock passes the
    deadline.
    """

    def __init__(self, reloj: Optional[RelojFalso] = None):
        self.reloj = reloj or RelojFalso()
        self._data: Dict[str, str] = {}
        self._expira: Dict[str, float] = {}
        self.operaciones: List[Tuple[str, str]] = []
        self.disponible = True

    def _verificar(self) -> None:
        if not self.disponible:
            raise ConnectionError("Redis no disponible")

    def _purgar(self, key: str) -> None:
        limite = self._expira.get(key)
        if limite is not None and self.reloj() >= limite:
            self._data.pop(key, None)
            self._expira.pop(key, None)

    async def get(self, key: str) -> Any:
        self.operaciones.append(("get", key))
        self._verificar()
        self._purgar(key)
        value = self._data.get(key)
        if value is None:
            return None
        try:
            decodificado = json.loads(value)
        except json.JSONDecodeError:
            return value
        # Un "null" almacenado no debe confundirse con una clave inexistente
        return value if decodificado is None else decodificado

    async def set(self, key: str, value: Any, expire: Optional[int] = None) -> None:
        self.operaciones.append(("set", key))
        self._verificar()
        if isinstance(value, (dict, list)):
            value = json.dumps(value)
        self._data[key] = value
        if expire:
            self._expira[key] = self.reloj() + expire
        else:
            self._expira.pop(key, None)

    async def delete(self, key: str) -> None:
        self.operaciones.append(("delete", key))
        self._verificar()
        self._data.pop(key, None)
        self._expira.pop(key, None)

    async def ping(self) -> bool:
        return self.disponible

    def escrituras(self) -> List[Tuple[str, str]]:
        return [op for op in self.operaciones if op[0] != "get"]

    def crudo(self, key: str) -> Optional[str]:
        self._purgar(key)
        return self._data.get(key)


# ============================================================
# OUTBOUND DOUBLES
# ============================================================


class MockWablas:
    """Records every outbound message instead of calling Wablas."""

    def __init__(self, exito: bool = True):
        self.enviados: List[Tuple[str, str]] = []
        self.exito = exito
        self.configurado = True

    async def enviar_texto(self, telefono: str, texto: str) -> bool:
        self.enviados.append((telefono, texto))
        return self.exito

    @property
    def ultimo(self) -> Optional[str]:
        return self.enviados[-1][1] if self.enviados else None


class MockFormulario:
    """Form sink double; set ``falla`` to simulate a rejected submission."""

    def __init__(self, falla: bool = False):
        self.recibidos: List[EnvioFormulario] = []
        self.falla = falla

    async def enviar(self, envio: EnvioFormulario) -> None:
        if self.falla:
            raise ErrorEnvioFormulario(envio.nomor, status_code=500)
        self.recibidos.append(envio)


# ============================================================
# TEST DATA FACTORIES
# ============================================================


@dataclass
class PayloadFactory:
    """Factory for Wablas webhook payloads."""

    @staticmethod
    def texto(mensaje: str, telefono: str = TELEFONO, **extra) -> Dict[str, Any]:
        carga = {
            "phone": telefono,
            "message": mensaje,
            "messageType": "text",
            "isFromMe": False,
            "pushName": "Budi",
        }
        carga.update(extra)
        return carga


@dataclass
class SesionFactory:
    """Factory for session variants."""

    @staticmethod
    def eligiendo_metodo(layanan: Layanan = Layanan.PENGADAAN) -> EligiendoMetodo:
        return EligiendoMetodo(layanan=layanan)

    @staticmethod
    def llenando_formulario(
        layanan: Layanan = Layanan.PENGADAAN,
        metode: MetodoKonsultasi = MetodoKonsultasi.OFFLINE,
    ) -> LlenandoFormulario:
        return LlenandoFormulario(layanan=layanan, metode=metode)

    @staticmethod
    def modo_chat() -> ModoChat:
        return ModoChat()


# ============================================================
# FIXTURES
# ============================================================


@pytest.fixture
def configuracion_prueba() -> ConfiguracionServicio:
    return ConfiguracionServicio(
        _env_file=None,
        wablas_api_key="api-key",
        wablas_secret_key="secret-key",
        wablas_phone_number=NUMERO_BOT,
        log_format="text",
    )


@pytest.fixture
def reloj() -> RelojFalso:
    return RelojFalso()


@pytest.fixture
def mock_redis(reloj) -> MockRedis:
    return MockRedis(reloj)


@pytest.fixture
def repositorio(mock_redis, configuracion_prueba) -> RepositorioSesionRedis:
    return RepositorioSesionRedis(
        mock_redis,
        ttl_segundos=configuracion_prueba.session_ttl_seconds,
        prefijo=configuracion_prueba.session_key_prefix,
    )


@pytest.fixture
def mock_wablas() -> MockWablas:
    return MockWablas()


@pytest.fixture
def mock_formulario() -> MockFormulario:
    return MockFormulario()


@pytest.fixture
def orquestador(repositorio, mock_wablas, mock_formulario, configuracion_prueba):
    return OrquestadorConversacional(
        repositorio_sesion=repositorio,
        cliente_wablas=mock_wablas,
        cliente_formulario=mock_formulario,
        configuracion=configuracion_prueba,
    )


@pytest.fixture
def orquestador_sin_destino(repositorio, mock_wablas, configuracion_prueba):
    return OrquestadorConversacional(
        repositorio_sesion=repositorio,
        cliente_wablas=mock_wablas,
        configuracion=configuracion_prueba,
    )
