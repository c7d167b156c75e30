"""PomoConfig UI package."""

from .config_dialog import ConfigDialog

__all__ = ["ConfigDialog"]
