from .Backend import Backend, backend
from .logger import get_logger
from .plotter import plot_layer

__all__ = [
    "Backend",
    "backend",
    "get_logger",
    "plot_layer",
]
