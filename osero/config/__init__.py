"""Config package exports."""

from .schema import AppConfig, UIConfig, load_config

__all__ = [
    "AppConfig",
    "UIConfig",
    "load_config",
]
