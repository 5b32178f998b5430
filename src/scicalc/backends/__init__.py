"""Backends for rendering expression trees as text."""

from .infix import to_infix

__all__ = ["to_infix"]
