"""Configuration adapters."""

from travel_durations.adapters.config.app_config import AppConfig, load_config

__all__ = ["AppConfig", "load_config"]
