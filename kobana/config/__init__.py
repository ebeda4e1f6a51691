# kobana/config/__init__.py
from .settings import Settings, settings, configure

__all__ = [
    "Settings",
    "settings",
    "configure",
]
