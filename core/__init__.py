"""
Núcleo del dominio del bot de la Klinik Konsultasi.

Contiene las excepciones específicas del dominio compartidas entre
infraestructura y servicios.
"""

__version__ = "1.0.0"
