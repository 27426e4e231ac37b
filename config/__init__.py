from .configuracion import ConfiguracionServicio, configuracion

__all__ = ["ConfiguracionServicio", "configuracion"]
