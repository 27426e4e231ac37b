"""
Configuración del servicio klinik-konsultasi-bot

Este módulo centraliza todas las variables de configuración necesarias para el
bot de WhatsApp de la Klinik Konsultasi. Utiliza pydantic-settings para
validación y manejo de variables de entorno, con soporte para archivos .env.

Variables de entorno soportadas:
- LOG_LEVEL: Nivel de logging (DEBUG, INFO, WARNING, ERROR). Default: INFO
- LOG_FORMAT: Formato de logs (json o text). Default: json
- SERVICE_NAME: Nombre del servicio en logs y health. Default: klinik-konsultasi-bot
- SERVER_HOST / SERVER_PORT: Bind de uvicorn. Default: 0.0.0.0 / 8000
- WEBHOOK_PATH: Ruta del webhook de Wablas. Default: /webhook
- REDIS_URL: URL de Redis para sesiones. Default: redis://localhost:6379
- REDIS_SOCKET_TIMEOUT_SECONDS: Timeout de sockets Redis. Default: 5
- SESSION_TTL_SECONDS: Expiración de la sesión. Default: 1800 (30 minutos)
- SESSION_KEY_PREFIX: Prefijo de claves de sesión. Default: "session:"
- WABLAS_BASE_URL: URL base del API de Wablas
- WABLAS_API_KEY / WABLAS_SECRET_KEY: Credenciales de Wablas. Optional
- WABLAS_PHONE_NUMBER: Número propio del bot. Optional
- WABLAS_TIMEOUT_SECONDS: Timeout de envío. Default: 15
- SPREADSHEET_WEBHOOK: Endpoint que recibe formularios. Optional
- SPREADSHEET_TIMEOUT_SECONDS: Timeout de reenvío. Default: 10
- MESSAGE_FOOTER: Pie agregado a cada mensaje saliente
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfiguracionServicio(BaseSettings):
    """
    Configuración centralizada del bot.

    Esta clase maneja todas las variables de configuración necesarias
    para el funcionamiento del servicio, con validación de tipos y
    valores por defecto.
    """

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    service_name: str = "klinik-konsultasi-bot"

    # Servidor
    server_host: str = "0.0.0.0"
    server_port: int = 8000
    webhook_path: str = "/webhook"

    # Redis Configuration
    redis_url: str = "redis://localhost:6379"
    redis_socket_timeout_seconds: float = 5.0

    # Sesiones
    session_ttl_seconds: int = 1800  # 30 minutos
    session_key_prefix: str = "session:"

    # Wablas Configuration
    wablas_base_url: str = "https://tegal.wablas.com/api/v2"
    wablas_api_key: Optional[str] = None
    wablas_secret_key: Optional[str] = None
    wablas_phone_number: Optional[str] = None
    wablas_timeout_seconds: float = 15.0

    # Spreadsheet (opcional)
    spreadsheet_webhook: Optional[str] = None
    spreadsheet_timeout_seconds: float = 10.0

    # Pie de mensajes salientes (vacío = deshabilitado)
    message_footer: str = "—\n_Coded by Damantine_"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def wablas_configurado(self) -> bool:
        """True si hay credenciales completas para enviar mensajes."""
        return bool(self.wablas_api_key and self.wablas_secret_key)


# Instancia global de configuración
configuracion = ConfiguracionServicio()
