"""Loading of schema model JSON from disk or over HTTP.

The schema model is usually exported by a metadata download step and then
read back here, either from the exported file or straight from the server
that serves it.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class JSONLoaderError(Exception):
    """Raised when a schema document cannot be read or decoded."""

    pass


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Read a schema document from a local file.

    Returns:
        ``(path, document)``

    Raises:
        FileNotFoundError: If there is no file at ``file_path``.
        JSONLoaderError: If the file is unreadable or not JSON.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Schema file not found: {path}")

    logger.debug("Reading schema document %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise JSONLoaderError(f"Cannot read schema file {path}: {e}") from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise JSONLoaderError(
            f"Schema file {path} is not valid JSON (line {e.lineno}): {e.msg}"
        ) from e

    logger.info("Read schema document %s (%d bytes)", path, len(text))
    return str(path), document


def load_json_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Download a schema document.

    Returns:
        ``(url, document)``

    Raises:
        JSONLoaderError: If the URL is malformed, the server cannot be
            reached or answers with an error status, or the body is not JSON.
    """
    parts = urlparse(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise JSONLoaderError(f"Invalid URL for schema download: {url}")

    logger.debug("Downloading schema document %s (timeout %ss)", url, timeout)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        raise JSONLoaderError(
            f"Schema download from {url} failed with HTTP {e.response.status_code}"
        ) from e
    except requests.exceptions.RequestException as e:
        raise JSONLoaderError(f"Schema download from {url} failed: {e}") from e

    try:
        document = response.json()
    except ValueError as e:
        raise JSONLoaderError(f"Schema served at {url} is not valid JSON") from e

    logger.info("Downloaded schema document %s", url)
    return url, document


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Load a schema document from exactly one of ``file_path`` or ``url``."""
    if bool(file_path) == bool(url):
        raise JSONLoaderError("Give exactly one of a schema file or a schema URL")

    if file_path:
        return load_json_from_file(file_path)
    return load_json_from_url(url, timeout)
