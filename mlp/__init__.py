from .errors import (
    MLPError,
    ConfigurationError,
    InvalidInputError,
    DimensionMismatchError,
)
from .activations import Sigmoid, Tanh
from .layers import Layer, MLPLayer
from .helpers import plot_layer

__version__ = "1.0.0"

__all__ = [
    "MLPError",
    "ConfigurationError",
    "InvalidInputError",
    "DimensionMismatchError",
    "Sigmoid",
    "Tanh",
    "Layer",
    "MLPLayer",
    "plot_layer",
]
