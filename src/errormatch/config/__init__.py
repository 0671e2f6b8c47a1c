from .loader import load_settings
from .models import DEFAULT_SETTINGS, MatcherSettings

__all__ = ["DEFAULT_SETTINGS", "MatcherSettings", "load_settings"]
