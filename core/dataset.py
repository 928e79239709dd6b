"""
Remote doctor dataset provider.

The full doctor list is fetched once per process and memoized; the query
engine only ever sees the resulting immutable tuple (or an empty one when
the fetch failed).
"""

import logging
import threading
from typing import Any, Dict, Optional, Tuple

import httpx

from data_handling.doctors import Doctor, load_doctors
from .config import DatasetConfig
from .exceptions import DatasetError

logger = logging.getLogger(__name__)

USER_AGENT = 'doctor-finder/1.0'


class HttpClient:
    """Thin wrapper around httpx for simpler mocking in tests."""

    def __init__(self, timeout: float = 10.0) -> None:
        self._client = httpx.Client(
            timeout=httpx.Timeout(timeout, connect=min(timeout, 5.0)),
            headers={'User-Agent': USER_AGENT},
            follow_redirects=True,
        )

    def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        response = self._client.get(url, params=params)
        response.raise_for_status()
        return response.json()

    def close(self) -> None:
        self._client.close()


class DatasetProvider:
    """
    Fetches the doctor dataset once and caches the result.

    Failures are not cached, so a later call retries the fetch.
    """

    def __init__(self, config: DatasetConfig, client: Optional[HttpClient] = None):
        self.config = config
        self._client = client
        self._doctors: Optional[Tuple[Doctor, ...]] = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._doctors is not None

    def fetch(self) -> Tuple[Doctor, ...]:
        """
        Return the dataset, fetching it on first use.

        Raises:
            DatasetError: If the request fails, returns an error status, or
                the payload is not a JSON list of records
        """
        if self._doctors is not None:
            return self._doctors

        with self._lock:
            if self._doctors is None:
                self._doctors = self._download()
        return self._doctors

    @property
    def doctors(self) -> Tuple[Doctor, ...]:
        """The fetched dataset, or an empty tuple until a fetch succeeds."""
        return self._doctors or ()

    def _get_client(self) -> HttpClient:
        if self._client is None:
            self._client = HttpClient(timeout=self.config.timeout_seconds)
        return self._client

    def _download(self) -> Tuple[Doctor, ...]:
        url = self.config.source_url
        logger.info(f"Fetching doctors from {url}")

        try:
            payload = self._get_client().get_json(url)
        except httpx.HTTPStatusError as e:
            raise DatasetError(f"Failed to fetch doctors: {e}", url=url,
                               status_code=e.response.status_code)
        except httpx.HTTPError as e:
            raise DatasetError(f"Failed to fetch doctors: {e}", url=url)
        except ValueError as e:
            raise DatasetError(f"Doctor dataset is not valid JSON: {e}", url=url)

        if not isinstance(payload, list):
            raise DatasetError(
                f"Doctor dataset must be a JSON list, got {type(payload).__name__}", url=url
            )

        doctors = load_doctors(payload)
        logger.info(f"Fetched {len(doctors)} doctors ({len(payload)} records)")
        return doctors


# Global provider instance - one fetch per process
_provider_instance: Optional[DatasetProvider] = None


def get_dataset_provider(config: Optional[DatasetConfig] = None) -> DatasetProvider:
    """Get the global dataset provider, creating it on first use."""
    global _provider_instance
    if _provider_instance is None:
        if config is None:
            from config_manager import get_config
            config = get_config().dataset
        _provider_instance = DatasetProvider(config)
    return _provider_instance


def reset_dataset_provider() -> None:
    """Drop the global provider (useful for testing)."""
    global _provider_instance
    _provider_instance = None
