"""
Custom exceptions for Doctor Finder.

Each exception keeps its structured details in `context` so callbacks and
logs can report where a failure came from without parsing the message.
"""

from typing import Optional


class DoctorFinderError(Exception):
    """Base exception for all Doctor Finder application errors."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def describe_context(self) -> str:
        return ", ".join(f"{k}={v}" for k, v in self.context.items())

    def __str__(self) -> str:
        details = self.describe_context()
        return f"{self.message} [{details}]" if details else self.message


class ConfigurationError(DoctorFinderError):
    """Raised when the TOML configuration cannot be loaded or is invalid."""

    def __init__(self, message: str, config_file: Optional[str] = None, field: Optional[str] = None):
        context = {}
        if config_file:
            context['config_file'] = config_file
        if field:
            context['field'] = field
        super().__init__(message, context)

    def describe_context(self) -> str:
        parts = []
        if 'field' in self.context:
            parts.append(f"field '{self.context['field']}'")
        if 'config_file' in self.context:
            parts.append(f"in {self.context['config_file']}")
        return " ".join(parts)


class DatasetError(DoctorFinderError):
    """Raised when the doctor dataset cannot be fetched or decoded."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        context = {}
        if url:
            context['url'] = url
        if status_code is not None:
            context['status_code'] = status_code
        super().__init__(message, context)

    @property
    def status_code(self) -> Optional[int]:
        return self.context.get('status_code')

    def describe_context(self) -> str:
        url = self.context.get('url')
        if self.status_code is not None:
            return f"HTTP {self.status_code} from {url}" if url else f"HTTP {self.status_code}"
        return f"source {url}" if url else ""
