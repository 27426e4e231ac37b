"""Configuración compartida del flujo de consultas."""

from models.estados import Layanan, MetodoKonsultasi

# Saludos y comandos que reinician la conversación desde cualquier estado
SALUDOS_REINICIO = {
    "hai",
    "halo",
    "hallo",
    "selamat pagi",
    "pagi",
    "selamat siang",
    "siang",
    "selamat sore",
    "sore",
    "selamat malam",
    "malam",
    "menu",
    "mulai",
    "start",
    "batal",
}

OPCIONES_METODO = {
    "1": MetodoKonsultasi.OFFLINE,
    "2": MetodoKonsultasi.ONLINE,
}

LAYANAN_POR_OPCION = {
    "1": Layanan.TATA_KELOLA,
    "2": Layanan.PENGADAAN,
    "3": Layanan.KEUANGAN,
    "4": Layanan.KINERJA,
}

# Coincidencia por subcadena, sin distinguir mayúsculas
PALABRAS_CLAVE_LAYANAN = {
    Layanan.TATA_KELOLA: ("tata kelola", "manajemen risiko"),
    Layanan.PENGADAAN: ("pengadaan", "barang/jasa"),
    Layanan.KEUANGAN: ("keuangan", "bmn"),
    Layanan.KINERJA: ("kinerja", "kepegawaian"),
}

OPCION_CHAT = "5"
PALABRA_CHAT = "chat"

# Mensajes de estado que el gateway reenvía como texto
MARCADOR_MENSAJE_ESTADO = '"status"'
