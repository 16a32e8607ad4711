from .scoring import clear_scoring_config_cache, get_scoring_config, get_scoring_value
from .settings import Settings, load_settings, settings

__all__ = [
    "Settings",
    "load_settings",
    "settings",
    "get_scoring_config",
    "get_scoring_value",
    "clear_scoring_config_cache",
]
