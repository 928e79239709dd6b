"""
Configuration management for Doctor Finder.

This module provides a split configuration system that separates concerns
into focused configuration classes, persisted together in a TOML file.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import toml

from data_handling.doctors import DEFAULT_CURRENCY, DEFAULT_PLACEHOLDER_IMAGE
from .exceptions import ConfigurationError

DEFAULT_SOURCE_URL = 'https://srijandubey.github.io/campus-api-mock/SRM-C1-25.json'
VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass
class DatasetConfig:
    """Configuration for the remote doctor dataset."""

    source_url: str = DEFAULT_SOURCE_URL
    timeout_seconds: float = 10.0
    placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE
    currency_symbol: str = DEFAULT_CURRENCY

    def validate(self) -> List[str]:
        """Validate the dataset configuration and return any errors."""
        errors = []

        if not self.source_url:
            errors.append("source_url cannot be empty")
        elif not self.source_url.startswith(('http://', 'https://')):
            errors.append("source_url must be an http(s) URL")

        if self.timeout_seconds <= 0:
            errors.append("timeout_seconds must be positive")

        if not self.currency_symbol:
            errors.append("currency_symbol cannot be empty")

        return errors


@dataclass
class UIConfig:
    """Configuration for user interface settings."""

    page_title: str = 'Find Doctors'
    theme: str = 'FLATLY'

    def validate(self) -> List[str]:
        """Validate the UI configuration and return any errors."""
        errors = []

        if not self.page_title:
            errors.append("page_title cannot be empty")

        if not self.theme:
            errors.append("theme cannot be empty")

        return errors


@dataclass
class LoggingConfig:
    """Configuration for application logging."""

    level: str = 'INFO'
    log_file: Optional[str] = None
    log_dir: str = 'logs'

    def validate(self) -> List[str]:
        """Validate the logging configuration and return any errors."""
        errors = []

        if self.level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"level must be one of {VALID_LOG_LEVELS}")

        return errors


@dataclass
class Config:
    """Main configuration class that combines all configuration sections."""

    config_file_path: str = "config.toml"

    dataset: DatasetConfig = field(default_factory=DatasetConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """Load configuration when an instance is created."""
        self.load_config()

    def to_dict(self) -> Dict[str, Any]:
        """Render the configuration as the TOML document structure."""
        logging_section = {
            'level': self.log.level,
            'log_dir': self.log.log_dir,
        }
        # TOML has no null; leave the key out instead
        if self.log.log_file:
            logging_section['log_file'] = self.log.log_file

        return {
            'dataset': {
                'source_url': self.dataset.source_url,
                'timeout_seconds': self.dataset.timeout_seconds,
                'placeholder_image': self.dataset.placeholder_image,
                'currency_symbol': self.dataset.currency_symbol,
            },
            'ui': {
                'page_title': self.ui.page_title,
                'theme': self.ui.theme,
            },
            'logging': logging_section,
        }

    def save_config(self) -> None:
        """Save current configuration to TOML file."""
        try:
            with open(self.config_file_path, 'w', encoding='utf-8') as f:
                toml.dump(self.to_dict(), f)
            logging.info(f"Configuration saved to {self.config_file_path}")
        except OSError as e:
            error_msg = f"Error saving configuration: {e}"
            logging.error(error_msg)
            raise ConfigurationError(error_msg, config_file=self.config_file_path)

    def load_config(self) -> None:
        """Load configuration from TOML file, creating it with defaults if missing."""
        try:
            with open(self.config_file_path, encoding='utf-8') as f:
                config_data = toml.load(f)
        except FileNotFoundError:
            logging.info(f"{self.config_file_path} not found. Creating with default values.")
            self.save_config()
            return
        except toml.TomlDecodeError as e:
            error_msg = f"Error decoding {self.config_file_path}: {e}"
            logging.error(error_msg)
            raise ConfigurationError(error_msg, config_file=self.config_file_path)

        if 'dataset' in config_data:
            dataset_config = config_data['dataset']
            self.dataset.source_url = dataset_config.get('source_url', self.dataset.source_url)
            self.dataset.timeout_seconds = float(
                dataset_config.get('timeout_seconds', self.dataset.timeout_seconds)
            )
            self.dataset.placeholder_image = dataset_config.get('placeholder_image', self.dataset.placeholder_image)
            self.dataset.currency_symbol = dataset_config.get('currency_symbol', self.dataset.currency_symbol)

        if 'ui' in config_data:
            ui_config = config_data['ui']
            self.ui.page_title = ui_config.get('page_title', self.ui.page_title)
            self.ui.theme = ui_config.get('theme', self.ui.theme)

        if 'logging' in config_data:
            logging_config = config_data['logging']
            self.log.level = logging_config.get('level', self.log.level)
            self.log.log_file = logging_config.get('log_file', self.log.log_file)
            self.log.log_dir = logging_config.get('log_dir', self.log.log_dir)

        logging.info(f"Configuration loaded from {self.config_file_path}")

    def validate(self) -> List[str]:
        """Validate all configuration sections and return any errors."""
        errors = []
        errors.extend(self.dataset.validate())
        errors.extend(self.ui.validate())
        errors.extend(self.log.validate())
        return errors
