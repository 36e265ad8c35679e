from .Layer import Layer
from .MLPLayer import MLPLayer

__all__ = [
    "Layer",
    "MLPLayer",
]
