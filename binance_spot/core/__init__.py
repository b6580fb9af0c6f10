"""Configuration and logging helpers."""

from .config import load_config, resolve_environment_variables, session_config_from, setup_logging

__all__ = ["load_config", "resolve_environment_variables", "session_config_from", "setup_logging"]
