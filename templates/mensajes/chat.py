"""Mensajes del modo chat con el equipo del Inspektorat."""


def mensaje_bienvenida_chat() -> str:
    return (
        "*Chat dengan Tim Inspektorat*\n\n"
        "Silakan ketik pesan Anda, dan tim kami akan merespons secepat mungkin.\n\n"
        "Ketik *MENU* untuk kembali ke menu utama."
    )
