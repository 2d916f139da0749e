"""Renderer: token streams to text."""

from .lib import best, pretty, render, write

__all__ = ["render", "write", "pretty", "best"]
