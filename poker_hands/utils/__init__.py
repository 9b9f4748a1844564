"""Utility helpers."""

from .seeding import set_seed

__all__ = ["set_seed"]
