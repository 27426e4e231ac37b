"""
Klinik Konsultasi Bot - Webhook de WhatsApp para la clínica de consultas
Recibe mensajes de Wablas, guía el registro de consultas y responde por WhatsApp
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.configuracion import ConfiguracionServicio, configuracion
from infrastructure.http import ClienteFormulario, ClienteWablas
from infrastructure.logging import CorrelationIdMiddleware, configure_logging
from infrastructure.persistencia import ClienteRedis, RepositorioSesionRedis
from services.orquestador_conversacion import OrquestadorConversacional

logger = logging.getLogger(__name__)

METODOS_NO_PERMITIDOS = ["PUT", "PATCH", "DELETE", "OPTIONS"]


def _ahora_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


async def _leer_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        logger.info("✋ Cuerpo del webhook no es JSON válido")
        return None


def crear_app(
    configuracion_servicio: Optional[ConfiguracionServicio] = None,
    orquestador: Optional[OrquestadorConversacional] = None,
    cliente_redis: Optional[ClienteRedis] = None,
) -> FastAPI:
    """
    Construye la aplicación FastAPI.

    Si no se inyecta un orquestador, los clientes de Redis, Wablas y de la
    hoja de cálculo se crean al arrancar y se cierran al detener el servicio.

    Args:
        configuracion_servicio: Configuración; por defecto la global
        orquestador: Orquestador ya construido (pruebas)
        cliente_redis: Cliente usado por ``/health`` cuando se inyecta el orquestador
    """
    cfg = configuracion_servicio or configuracion
    configure_logging(
        level=cfg.log_level,
        json_output=cfg.log_format.lower() == "json",
        service_name=cfg.service_name,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if orquestador is not None:
            app.state.orquestador = orquestador
            app.state.cliente_redis = cliente_redis
            yield
            return

        logger.info(f"🚀 Iniciando {cfg.service_name}...")
        redis = ClienteRedis(cfg.redis_url, socket_timeout=cfg.redis_socket_timeout_seconds)
        await redis.connect()

        cliente_wablas = ClienteWablas(
            base_url=cfg.wablas_base_url,
            api_key=cfg.wablas_api_key,
            secret_key=cfg.wablas_secret_key,
            pie_mensaje=cfg.message_footer,
            timeout=cfg.wablas_timeout_seconds,
        )
        if not cliente_wablas.configurado:
            logger.warning("⚠️ WABLAS_API_KEY/WABLAS_SECRET_KEY no configurados")

        cliente_formulario = None
        if cfg.spreadsheet_webhook:
            cliente_formulario = ClienteFormulario(
                cfg.spreadsheet_webhook, timeout=cfg.spreadsheet_timeout_seconds
            )
        else:
            logger.warning("⚠️ SPREADSHEET_WEBHOOK no configurado, formularios no se reenviarán")

        app.state.cliente_redis = redis
        app.state.orquestador = OrquestadorConversacional(
            repositorio_sesion=RepositorioSesionRedis(
                redis,
                ttl_segundos=cfg.session_ttl_seconds,
                prefijo=cfg.session_key_prefix,
            ),
            cliente_wablas=cliente_wablas,
            cliente_formulario=cliente_formulario,
            configuracion=cfg,
        )
        logger.info(f"✅ {cfg.service_name} listo en {cfg.webhook_path}")

        try:
            yield
        finally:
            logger.info(f"🔴 Deteniendo {cfg.service_name}...")
            await cliente_wablas.close()
            if cliente_formulario is not None:
                await cliente_formulario.close()
            await redis.disconnect()
            logger.info("✅ Conexiones cerradas")

    app = FastAPI(
        title="Klinik Konsultasi Bot",
        description="Webhook de WhatsApp para el registro de consultas",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIdMiddleware)

    @app.exception_handler(StarletteHTTPException)
    async def manejar_http_exception(request: Request, exc: StarletteHTTPException):
        # Cualquier otro método sobre el webhook responde igual que PUT/PATCH/DELETE
        if exc.status_code == 405 and request.url.path == cfg.webhook_path:
            return PlainTextResponse("Method not allowed", status_code=405)
        return await http_exception_handler(request, exc)

    @app.get("/health")
    async def health_check(request: Request):
        """Health check del servicio; nunca falla."""
        redis = getattr(request.app.state, "cliente_redis", None)
        conectado = redis is not None and await redis.ping()
        return {
            "status": "healthy",
            "service": cfg.service_name,
            "redis": "connected" if conectado else "unavailable",
            "timestamp": _ahora_iso(),
        }

    @app.get(cfg.webhook_path)
    async def webhook_status():
        return {
            "status": "ok",
            "message": "WA Bot Webhook is running",
            "timestamp": _ahora_iso(),
        }

    @app.post(cfg.webhook_path, response_class=PlainTextResponse)
    async def webhook(request: Request):
        """
        Recibe una entrega de Wablas.

        Siempre responde 200 "OK" para que el gateway no reintente; los
        errores se registran.
        """
        carga = await _leer_json(request)
        try:
            await request.app.state.orquestador.procesar_payload(carga)
        except Exception as e:
            logger.error(f"❌ Error manejando webhook: {e}")
        return PlainTextResponse("OK")

    @app.api_route(cfg.webhook_path, methods=METODOS_NO_PERMITIDOS)
    async def webhook_metodo_no_permitido():
        return PlainTextResponse("Method not allowed", status_code=405)

    return app


app = crear_app()


if __name__ == "__main__":
    uvicorn.run(
        "principal:app",
        host=configuracion.server_host,
        port=configuracion.server_port,
        log_level=configuracion.log_level.lower(),
    )
