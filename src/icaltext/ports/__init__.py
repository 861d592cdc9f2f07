"""Ports - interfaces shared between the core and its collaborators."""

from .serializable import SerializableProperty

__all__ = [
    "SerializableProperty",
]
