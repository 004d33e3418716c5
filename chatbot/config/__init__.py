"""Configuration package exports."""

from .loader import apply_env_overrides, load_config  # noqa: F401
from .model import AppConfig  # noqa: F401

__all__ = ["AppConfig", "apply_env_overrides", "load_config"]
