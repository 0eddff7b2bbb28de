"""Client configuration."""

from .loader import ENV_PREFIX, load_settings
from .models import ClientSettings

__all__ = ["ENV_PREFIX", "ClientSettings", "load_settings"]
