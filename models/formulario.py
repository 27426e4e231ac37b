"""Modelos del formulario de registro de consulta."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from models.estados import Layanan, MetodoKonsultasi


class DatosFormulario(BaseModel):
    """Los cuatro campos que el usuario escribe en el formulario."""

    nama: str = Field(..., min_length=1)
    unit: str = Field(..., min_length=1)
    jabatan: str = Field(..., min_length=1)
    waktu: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)


class EnvioFormulario(BaseModel):
    """Registro plano que se reenvía al endpoint de la hoja de cálculo."""

    timestamp: str
    nomor: str
    nama: str
    unit: str
    jabatan: str
    waktu: str
    layanan: Layanan
    metode: MetodoKonsultasi

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
