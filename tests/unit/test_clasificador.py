"""
Unit tests for the command classifier.

The classifier is pure, so every rule is checked directly against a session
variant without mocks.
"""

import pytest

from flows.clasificador import (
    ElegirLayanan,
    ElegirMetodo,
    FormularioInvalido,
    FormularioValido,
    IniciarChat,
    MensajeChat,
    NoReconocido,
    Reiniciar,
    clasificar_intencion,
    resolver_layanan,
)
from models.estados import Layanan, MetodoKonsultasi, SinSesion

from conftest import FORMULARIO_VALIDO, SesionFactory

TODAS_LAS_SESIONES = [
    SinSesion(),
    SesionFactory.eligiendo_metodo(),
    SesionFactory.llenando_formulario(),
    SesionFactory.modo_chat(),
]


class TestReinicio:
    """Rule 1: greetings and reset commands win from any state."""

    @pytest.mark.parametrize("sesion", TODAS_LAS_SESIONES)
    @pytest.mark.parametrize(
        "texto", ["halo", "Hai", "  HALLO ", "selamat pagi", "Malam", "menu", "MENU", "batal", "start"]
    )
    def test_reinicio_desde_cualquier_estado(self, texto, sesion):
        assert clasificar_intencion(texto, sesion) == Reiniciar()

    def test_saludo_con_texto_extra_no_reinicia(self):
        """Only exact commands reset."""
        assert clasificar_intencion("halo apa kabar", SinSesion()) == NoReconocido()


class TestEleccionMetodo:
    """Rule 2: method selection while choosing a method."""

    def test_offline(self):
        intencion = clasificar_intencion("1", SesionFactory.eligiendo_metodo())

        assert intencion == ElegirMetodo(metodo=MetodoKonsultasi.OFFLINE)

    def test_online_con_espacios(self):
        intencion = clasificar_intencion(" 2 ", SesionFactory.eligiendo_metodo())

        assert intencion == ElegirMetodo(metodo=MetodoKonsultasi.ONLINE)

    @pytest.mark.parametrize("texto", ["3", "5", "offline", "chat", "pengadaan"])
    def test_otra_entrada_no_reconocida(self, texto):
        """Anything else while choosing a method falls through to the fallback."""
        assert clasificar_intencion(texto, SesionFactory.eligiendo_metodo()) == NoReconocido()


class TestFormulario:
    """Rule 3: every message while filling the form is a form attempt."""

    def test_formulario_valido(self):
        intencion = clasificar_intencion(FORMULARIO_VALIDO, SesionFactory.llenando_formulario())

        assert isinstance(intencion, FormularioValido)
        assert intencion.datos.nama == "Budi"
        assert intencion.datos.waktu == "Senin 10:00"

    @pytest.mark.parametrize("texto", ["Nama: Budi", "1", "5", "chat", "pengadaan"])
    def test_formulario_invalido(self, texto):
        intencion = clasificar_intencion(texto, SesionFactory.llenando_formulario())

        assert intencion == FormularioInvalido()


class TestModoChat:
    """Rule 4: free chat is silent."""

    @pytest.mark.parametrize("texto", ["Selamat siang pak, saya mau tanya", "1", "5", "chat"])
    def test_mensaje_chat(self, texto):
        assert clasificar_intencion(texto, SesionFactory.modo_chat()) == MensajeChat()


class TestSinSesion:
    """Rules 5 and 6: service selection and chat entry without a session."""

    @pytest.mark.parametrize(
        "texto,layanan",
        [
            ("1", Layanan.TATA_KELOLA),
            ("2", Layanan.PENGADAAN),
            ("3", Layanan.KEUANGAN),
            ("4", Layanan.KINERJA),
        ],
    )
    def test_servicio_por_numero(self, texto, layanan):
        assert clasificar_intencion(texto, SinSesion()) == ElegirLayanan(layanan=layanan)

    @pytest.mark.parametrize(
        "texto,layanan",
        [
            ("Tata Kelola", Layanan.TATA_KELOLA),
            ("mau konsultasi manajemen risiko", Layanan.TATA_KELOLA),
            ("PENGADAAN", Layanan.PENGADAAN),
            ("barang/jasa", Layanan.PENGADAAN),
            ("soal BMN", Layanan.KEUANGAN),
            ("kepegawaian", Layanan.KINERJA),
        ],
    )
    def test_servicio_por_palabra_clave(self, texto, layanan):
        assert clasificar_intencion(texto, SinSesion()) == ElegirLayanan(layanan=layanan)

    @pytest.mark.parametrize("texto", ["5", "chat", "Mau CHAT dengan tim"])
    def test_entrada_al_chat(self, texto):
        assert clasificar_intencion(texto, SinSesion()) == IniciarChat()

    @pytest.mark.parametrize("texto", ["6", "0", "12", "apa ini", "terima kasih"])
    def test_no_reconocido(self, texto):
        assert clasificar_intencion(texto, SinSesion()) == NoReconocido()


class TestResolverLayanan:
    def test_numero_exacto(self):
        assert resolver_layanan("4") == Layanan.KINERJA

    def test_numero_dentro_de_texto_no_cuenta(self):
        assert resolver_layanan("opsi 4") is None
