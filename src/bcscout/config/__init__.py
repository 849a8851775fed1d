"""Configuration loading and built-in defaults."""

from __future__ import annotations

from .config import Config

__all__ = ["Config"]
