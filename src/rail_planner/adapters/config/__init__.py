"""Configuration adapters."""

from rail_planner.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
