from .Sigmoid import Sigmoid
from .Tanh import Tanh

__all__ = [
    "Sigmoid",
    "Tanh",
]
