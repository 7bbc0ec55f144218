"""Route group exports."""

from . import forms, health, locations

__all__ = ["forms", "health", "locations"]
