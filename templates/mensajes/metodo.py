"""Mensaje de selección de método de consulta."""


def mensaje_elegir_metodo(layanan: str) -> str:
    """Confirma el servicio elegido y pide el método Offline/Online."""
    return (
        f"Anda memilih:\n*{layanan}*\n\n"
        "Terima kasih atas pilihan Anda terhadap jenis layanan konsultasi.\n"
        "Mohon konfirmasi metode pelaksanaan konsultasi:\n\n"
        "1. Offline (Tatap Muka)\n"
        "2. Online (Virtual)\n\n"
        "Balas dengan *ANGKA* pilihan Anda (contoh: 1)."
    )
