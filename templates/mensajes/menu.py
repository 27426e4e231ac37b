"""Mensajes del menú principal."""

# ==================== MENÚ ====================

MENU_LIST_TEXT = (
    "\n".join(
        [
            "1. Tata Kelola & Manajemen Risiko",
            "2. Pengadaan Barang/Jasa",
            "3. Pengelolaan Keuangan & BMN",
            "4. Kinerja & Kepegawaian",
            "5. Chat dengan Tim Inspektorat",
        ]
    )
    + "\n\nBalas dengan *ANGKA* pilihan Anda (contoh: 1)."
)


def mensaje_bienvenida() -> str:
    """Bienvenida con el menú principal (saludos y comandos de reinicio)."""
    return (
        "*Selamat datang di Layanan Klinik Konsultasi*\n"
        "*Inspektorat Lembaga Kebijakan Pengadaan Barang/Jasa Pemerintah.*\n\n"
        "Silakan pilih layanan konsultasi sesuai kebutuhan Anda:\n\n"
        f"{MENU_LIST_TEXT}"
    )


def mensaje_comando_no_reconocido() -> str:
    return (
        "Maaf, saya tidak memahami perintah tersebut.\n"
        "Ketik *MENU* untuk melihat pilihan layanan."
    )
