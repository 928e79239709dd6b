"""
Centralized configuration manager to avoid multiple Config instances.
"""
import os

from core.config import Config

# Overrides the config file location, e.g. for deployments
CONFIG_PATH_ENV_VAR = 'DOCTOR_FINDER_CONFIG'

# Global config instance - loaded once
_config_instance = None

def get_config() -> Config:
    """Get the global config instance, creating it only once."""
    global _config_instance
    if _config_instance is None:
        config_path = os.environ.get(CONFIG_PATH_ENV_VAR, 'config.toml')
        _config_instance = Config(config_file_path=config_path)
    return _config_instance

def refresh_config() -> Config:
    """Force a refresh of the global config instance."""
    global _config_instance
    _config_instance = None
    return get_config()
