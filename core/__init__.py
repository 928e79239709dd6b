"""
Core infrastructure module for Doctor Finder.

This module provides the foundational components including configuration
management, the remote dataset provider, logging setup, and custom exceptions.
"""

from .config import DatasetConfig, UIConfig, LoggingConfig, Config
from .dataset import DatasetProvider, HttpClient, get_dataset_provider, reset_dataset_provider
from .exceptions import DoctorFinderError, ConfigurationError, DatasetError
from .logging_config import setup_logging

__all__ = [
    # Configuration
    'DatasetConfig',
    'UIConfig',
    'LoggingConfig',
    'Config',

    # Dataset
    'DatasetProvider',
    'HttpClient',
    'get_dataset_provider',
    'reset_dataset_provider',

    # Exceptions
    'DoctorFinderError',
    'ConfigurationError',
    'DatasetError',

    # Logging
    'setup_logging',
]

# Version info
__version__ = "1.0.0"
