"""
Unit tests for the registration form parser.
"""

import pytest

from flows.formulario import parsear_formulario
from models.formulario import DatosFormulario


class TestParsearFormulario:
    """Tests for extracting the four form fields."""

    def test_formato_basico(self):
        datos = parsear_formulario(
            "Nama: Budi\nUnit: Itjen\nJabatan: Auditor\nReferensi Hari/Jam: Senin 10:00"
        )

        assert datos == DatosFormulario(
            nama="Budi", unit="Itjen", jabatan="Auditor", waktu="Senin 10:00"
        )

    def test_etiquetas_sin_distinguir_mayusculas(self):
        datos = parsear_formulario(
            "NAMA: Budi\nunit: Itjen\nJaBaTaN: Auditor\nreferensi hari/jam: Senin"
        )

        assert datos is not None
        assert datos.nama == "Budi"
        assert datos.waktu == "Senin"

    def test_espacios_arbitrarios(self):
        datos = parsear_formulario(
            "  Nama :   Budi Santoso  \r\n"
            "Unit:Inspektorat\r\n\r\n"
            "   Jabatan  :  Auditor Ahli Pertama\n"
            "Referensi  Hari / Jam :  Senin, 4 Nov 2025 - 10:00 WIB   "
        )

        assert datos == DatosFormulario(
            nama="Budi Santoso",
            unit="Inspektorat",
            jabatan="Auditor Ahli Pertama",
            waktu="Senin, 4 Nov 2025 - 10:00 WIB",
        )

    def test_valor_con_dos_puntos(self):
        datos = parsear_formulario(
            "Nama: Budi\nUnit: Itjen\nJabatan: Auditor\nReferensi Hari/Jam: Senin 10:00 - 11:30"
        )

        assert datos.waktu == "Senin 10:00 - 11:30"

    def test_texto_alrededor(self):
        datos = parsear_formulario(
            "Berikut data saya\n"
            "Nama: Budi\nUnit: Itjen\nJabatan: Auditor\nReferensi Hari/Jam: Senin\n"
            "Terima kasih"
        )

        assert datos is not None
        assert datos.jabatan == "Auditor"

    @pytest.mark.parametrize(
        "texto",
        [
            "",
            "Halo",
            "Nama: Budi",
            "Nama: Budi\nUnit: Itjen\nJabatan: Auditor",
            # orden incorrecto
            "Unit: Itjen\nNama: Budi\nJabatan: Auditor\nReferensi Hari/Jam: Senin",
            # todo en una línea
            "Nama: Budi Unit: Itjen Jabatan: Auditor Referensi Hari/Jam: Senin",
            # valor vacío
            "Nama:\nUnit: Itjen\nJabatan: Auditor\nReferensi Hari/Jam: Senin",
            "Nama: Budi\nUnit: Itjen\nJabatan: Auditor\nReferensi Hari/Jam:   ",
        ],
    )
    def test_formatos_invalidos(self, texto):
        assert parsear_formulario(texto) is None
