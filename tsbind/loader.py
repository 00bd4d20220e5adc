"""Loading of binding descriptions.

A binding description is a JSON object produced by the type-resolution stage.
It can be read from a file, fetched over HTTP or piped on standard input;
every source goes through the same parsing and shape checks.
"""

import json
from pathlib import Path
from typing import Any, Dict, NamedTuple, TextIO
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

# Top-level keys understood by the generator
DESCRIPTION_KEYS = (
    "commands",
    "events",
    "statics",
    "types",
    "dependent_types",
    "globals",
)


class DescriptionLoadError(Exception):
    """Raised when a binding description cannot be read or is not an object."""

    pass


class LoadedDescription(NamedTuple):
    """A parsed description and a label for where it came from."""

    source: str
    data: Dict[str, Any]


def check_description(data: Any, source: str) -> Dict[str, Any]:
    """Check the top-level shape of a parsed description.

    Unknown keys and descriptions without commands, events or statics are
    logged but accepted; entry-level checks happen during conversion.

    Raises:
        DescriptionLoadError: If the payload is not a JSON object.
    """
    if not isinstance(data, dict):
        raise DescriptionLoadError(
            f"Binding description from {source} must be a JSON object, "
            f"got {type(data).__name__}"
        )

    unknown = [key for key in data if key not in DESCRIPTION_KEYS]
    if unknown:
        logger.warning(
            "Ignoring unknown keys in description from %s: %s",
            source,
            ", ".join(unknown),
        )

    if not any(data.get(key) for key in ("commands", "events", "statics")):
        logger.warning(
            "Description from %s declares no commands, events or statics", source
        )

    return data


def parse_description(text: str, source: str) -> LoadedDescription:
    """Parse description text.

    Raises:
        DescriptionLoadError: If the text is not valid JSON or not an object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s: %s", source, e)
        raise DescriptionLoadError(
            f"Binding description from {source} is not valid JSON "
            f"(line {e.lineno}, column {e.colno}): {e.msg}"
        ) from e

    return LoadedDescription(source, check_description(data, source))


def read_description_file(file_path: str | Path) -> LoadedDescription:
    """Read a binding description from a local file.

    Args:
        file_path: Path to the description.

    Returns:
        The parsed description, labelled with the path.

    Raises:
        DescriptionLoadError: If the file is missing, unreadable or invalid.
    """
    path = Path(file_path)
    logger.debug("Reading description file %s", path)

    if not path.is_file():
        raise DescriptionLoadError(f"Binding description not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DescriptionLoadError(
            f"Cannot read binding description {path}: {e}"
        ) from e

    return parse_description(text, str(path))


def fetch_description(url: str, timeout: float = 30) -> LoadedDescription:
    """Fetch a binding description over HTTP(S).

    Args:
        url: Location of the description.
        timeout: Request timeout in seconds.

    Raises:
        DescriptionLoadError: If the URL is not HTTP(S), the request fails or
            the body is not a description.
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise DescriptionLoadError(f"Description URL must be http(s): {url}")

    logger.debug("Fetching description from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise DescriptionLoadError(f"Timed out fetching description from {url}") from e
    except requests.exceptions.ConnectionError as e:
        raise DescriptionLoadError(f"Cannot connect to {url}") from e
    except requests.exceptions.HTTPError as e:
        raise DescriptionLoadError(
            f"HTTP {e.response.status_code} fetching description from {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        raise DescriptionLoadError(f"Request for {url} failed: {e}") from e

    return parse_description(response.text, url)


def read_description_stream(stream: TextIO, name: str = "stdin") -> LoadedDescription:
    """Read a binding description from an open text stream."""
    return parse_description(stream.read(), name)
