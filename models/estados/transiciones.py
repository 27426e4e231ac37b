"""
Definición de transiciones válidas entre estados.

Este módulo implementa el grafo de transiciones de la máquina de estados
conversacional, definiendo qué transiciones son permitidas desde cada estado.
"""

from typing import FrozenSet

from .sesion import EstadoConversacion


# Grafo de transiciones válidas: estado -> conjunto de estados destino permitidos
TRANSICIONES_VALIDAS: dict[EstadoConversacion, FrozenSet[EstadoConversacion]] = {
    # Sin sesión: elegir servicio, entrar al chat o seguir sin sesión
    EstadoConversacion.NONE: frozenset({
        EstadoConversacion.NONE,            # Saludo, comando no reconocido
        EstadoConversacion.CHOOSE_METHOD,   # Servicio elegido
        EstadoConversacion.CHAT_MODE,       # Opción 5 / "chat"
    }),

    # Eligiendo método: Offline/Online
    EstadoConversacion.CHOOSE_METHOD: frozenset({
        EstadoConversacion.CHOOSE_METHOD,   # Entrada no reconocida
        EstadoConversacion.FILL_FORM,       # Método elegido
        EstadoConversacion.NONE,            # Menú / batal
    }),

    # Llenando formulario: reintentos hasta completar
    EstadoConversacion.FILL_FORM: frozenset({
        EstadoConversacion.FILL_FORM,       # Formato inválido o fallo de envío
        EstadoConversacion.NONE,            # Registro exitoso o menú
    }),

    # Chat libre
    EstadoConversacion.CHAT_MODE: frozenset({
        EstadoConversacion.CHAT_MODE,       # Mensajes al equipo
        EstadoConversacion.NONE,            # Menú
    }),
}


def puede_transicionar(
    estado_actual: EstadoConversacion,
    estado_destino: EstadoConversacion,
) -> bool:
    """
    Verifica si una transición entre estados es válida.

    Args:
        estado_actual: Estado de origen
        estado_destino: Estado de destino

    Returns:
        True si la transición está permitida, False en caso contrario
    """
    estados_permitidos = TRANSICIONES_VALIDAS.get(estado_actual, frozenset())
    return estado_destino in estados_permitidos

