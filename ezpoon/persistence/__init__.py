"""Persistence layer: each store owns its file path, data format, and I/O."""

from ._base import DecodeError, JsonStore
from .slots import SlotStore

__all__ = [
    "DecodeError",
    "JsonStore",
    "SlotStore",
]
