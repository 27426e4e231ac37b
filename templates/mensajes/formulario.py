"""Mensajes del formulario de registro."""

from typing import Mapping

# ==================== INSTRUCCIONES ====================

_FORMATO_FORMULARIO = (
    "*Format pengisian:*\n"
    "Nama: [Nama lengkap Anda]\n"
    "Unit: [Unit organisasi]\n"
    "Jabatan: [Jabatan Anda]\n"
    "Referensi Hari/Jam: [Hari/Tanggal dan Jam]\n\n"
    "*Contoh:*\n"
    "Nama: Budi Santoso\n"
    "Unit: Inspektorat\n"
    "Jabatan: Auditor Ahli Pertama\n"
    "Referensi Hari/Jam: Senin, 4 Nov 2025 - 10:00 WIB"
)


def mensaje_instrucciones_formulario(metode: str) -> str:
    """Instrucciones del formulario con título según el método elegido."""
    return (
        f"*Form Pendaftaran Konsultasi {metode}*\n\n"
        "Dimohon kesediaannya untuk mengisi data diri berikut:\n\n"
        f"{_FORMATO_FORMULARIO}"
    )


# ==================== RESULTADOS ====================

def mensaje_formulario_invalido() -> str:
    """El texto no sigue el formato de cuatro campos."""
    return (
        "❌ *Format Tidak Sesuai!*\n\n"
        "Data Anda belum dapat kami baca. Pastikan setiap isian berada di baris "
        "tersendiri dan berurutan, lalu kirim ulang.\n\n"
        f"{_FORMATO_FORMULARIO}"
    )


def mensaje_registro_fallido() -> str:
    """El formulario no se pudo guardar en el destino externo."""
    return (
        "❌ *Pendaftaran Gagal!*\n\n"
        "Terjadi kesalahan saat menyimpan data Anda. "
        "Silakan kirim ulang format isian Anda."
    )


def mensaje_registro_exitoso(datos: Mapping[str, str]) -> str:
    """Confirma el registro repitiendo todos los datos capturados."""
    return (
        "✅ *Pendaftaran Berhasil!*\n\n"
        f"Nama: {datos['nama']}\n"
        f"Unit: {datos['unit']}\n"
        f"Jabatan: {datos['jabatan']}\n"
        f"Referensi Hari/Jam: {datos['waktu']}\n"
        f"Layanan: {datos['layanan']}\n"
        f"Metode: {datos['metode']}\n\n"
        "Terima kasih telah menghubungi Klinik Konsultasi Inspektorat.\n\n"
        "Ketik *MENU* untuk layanan lainnya."
    )
