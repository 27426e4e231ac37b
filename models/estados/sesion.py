"""
Schema validado para la sesión conversacional usando Pydantic.

La sesión se modela como una variante etiquetada: cada paso del flujo es un
modelo distinto, de modo que combinaciones ilegales (por ejemplo llenar el
formulario sin método elegido) no se pueden representar. El registro
persistido en Redis conserva el formato plano ``{"step", "layanan", "metode"}``.
"""

from enum import Enum
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class EstadoConversacion(str, Enum):
    """
    Estados de la máquina conversacional.

    Flujo principal:
    none -> choose_method -> fill_form -> none
    none -> chat_mode -> none
    """

    NONE = "none"
    CHOOSE_METHOD = "choose_method"
    FILL_FORM = "fill_form"
    CHAT_MODE = "chat_mode"


class Layanan(str, Enum):
    """Categorías de consulta ofrecidas por la clínica."""

    TATA_KELOLA = "Tata Kelola & Manajemen Risiko"
    PENGADAAN = "Pengadaan Barang/Jasa"
    KEUANGAN = "Pengelolaan Keuangan & BMN"
    KINERJA = "Kinerja & Kepegawaian"


class MetodoKonsultasi(str, Enum):
    """Modalidad de la consulta."""

    OFFLINE = "Offline"
    ONLINE = "Online"


class _SesionBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def estado(self) -> EstadoConversacion:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        """Convierte la sesión al registro plano que se guarda en Redis."""
        return self.model_dump(mode="json", exclude_none=True)


class SinSesion(_SesionBase):
    """No hay conversación activa para el teléfono."""

    @property
    def estado(self) -> EstadoConversacion:
        return EstadoConversacion.NONE


class EligiendoMetodo(_SesionBase):
    """El usuario eligió un servicio y debe elegir Offline/Online."""

    step: Literal["choose_method"] = "choose_method"
    layanan: Layanan

    @property
    def estado(self) -> EstadoConversacion:
        return EstadoConversacion.CHOOSE_METHOD

    def con_metodo(self, metodo: MetodoKonsultasi) -> "LlenandoFormulario":
        return LlenandoFormulario(layanan=self.layanan, metode=metodo)


class LlenandoFormulario(_SesionBase):
    """El usuario debe enviar el formulario de registro."""

    step: Literal["fill_form"] = "fill_form"
    layanan: Layanan
    metode: MetodoKonsultasi

    @property
    def estado(self) -> EstadoConversacion:
        return EstadoConversacion.FILL_FORM


class ModoChat(_SesionBase):
    """Conversación libre con el equipo del Inspektorat."""

    step: Literal["chat_mode"] = "chat_mode"

    @property
    def estado(self) -> EstadoConversacion:
        return EstadoConversacion.CHAT_MODE


SesionActiva = Annotated[
    Union[EligiendoMetodo, LlenandoFormulario, ModoChat],
    Field(discriminator="step"),
]
Sesion = Union[SinSesion, EligiendoMetodo, LlenandoFormulario, ModoChat]

_adaptador_sesion: TypeAdapter = TypeAdapter(SesionActiva)


def sesion_desde_registro(datos: Optional[Dict[str, Any]]) -> Sesion:
    """
    Interpreta un registro almacenado como sesión.

    Args:
        datos: Diccionario leído de Redis o None si la clave no existe

    Returns:
        La variante de sesión correspondiente

    Raises:
        ValueError: Si el registro no corresponde a ninguna variante válida
    """
    if datos is None:
        return SinSesion()
    if not isinstance(datos, dict):
        raise ValueError(f"Registro de sesión no es un objeto: {type(datos).__name__}")
    return _adaptador_sesion.validate_python(datos)
