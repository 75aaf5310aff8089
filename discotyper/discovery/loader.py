"""Loading utilities for Discovery documents.

This module provides utilities for loading Google Discovery REST descriptions
and the top-level API directory listing from URLs or local JSON files.
"""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar
from urllib.parse import urlparse

import httpx
from pydantic import BaseModel, ValidationError

from discotyper.discovery.models import DirectoryList, RestDescription
from discotyper.exceptions import DiscoveryLoadError, DiscoveryValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar('ModelT', bound=BaseModel)


class DiscoveryLoader:
    """Loads Discovery documents from URLs or file paths.

    Example:
        >>> loader = DiscoveryLoader()
        >>> api = loader.load('https://www.googleapis.com/discovery/v1/apis/drive/v3/rest')
        >>> directory = loader.load_directory('https://www.googleapis.com/discovery/v1/apis')
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        timeout: float = 30.0,
        base_path: str | Path | None = None,
    ):
        """Initialize the loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
                        If not provided, ``httpx.get`` is used per request.
            timeout: Request timeout in seconds for the default client.
            base_path: Base path for resolving relative file paths.
                      Defaults to current working directory.
        """
        self._http_client = http_client
        self._timeout = timeout
        self._base_path = Path(base_path) if base_path else Path.cwd()

    def load(self, source: str) -> RestDescription:
        """Load and validate a REST description.

        Raises:
            DiscoveryLoadError: If the document cannot be fetched or parsed.
            DiscoveryValidationError: If the JSON is not a REST description.
        """
        return self._load_model(source, RestDescription)

    def load_directory(self, source: str) -> DirectoryList:
        """Load the directory listing of all available APIs."""
        return self._load_model(source, DirectoryList)

    def _load_model(self, source: str, model: type[ModelT]) -> ModelT:
        try:
            if self._is_url(source):
                content = self._load_from_url(source)
            else:
                content = self._load_from_file(source)
        except DiscoveryLoadError:
            raise
        except Exception as e:
            raise DiscoveryLoadError(source, cause=e)

        try:
            return model.model_validate(content)
        except ValidationError as e:
            raise DiscoveryValidationError(
                source, errors=[err['msg'] for err in e.errors()]
            )

    def _is_url(self, text: str) -> bool:
        """Check if a string is a URL."""
        try:
            result = urlparse(text)
            return result.scheme in ('http', 'https')
        except ValueError:
            return False

    def _load_from_url(self, url: str) -> Any:
        """Load document content from a URL."""
        logger.debug('Fetching %s', url)
        try:
            if self._http_client:
                response = self._http_client.get(url)
            else:
                response = httpx.get(url, follow_redirects=True, timeout=self._timeout)

            response.raise_for_status()
            return json.loads(response.text)

        except httpx.HTTPError as e:
            raise DiscoveryLoadError(url, cause=e)
        except json.JSONDecodeError as e:
            raise DiscoveryLoadError(url, cause=e)

    def _load_from_file(self, file_path: str) -> Any:
        """Load document content from a file."""
        path = Path(file_path)
        if not path.is_absolute():
            path = self._base_path / path

        if not path.exists():
            raise DiscoveryLoadError(
                str(file_path), cause=FileNotFoundError(f'File not found: {path}')
            )

        try:
            return json.loads(path.read_text(encoding='utf-8'))
        except json.JSONDecodeError as e:
            raise DiscoveryLoadError(str(file_path), cause=e)
        except OSError as e:
            raise DiscoveryLoadError(str(file_path), cause=e)
