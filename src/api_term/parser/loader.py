"""Load the endpoint catalog from spec files and URLs.

Every source is tried on its own. A source that cannot be read, fetched
or parsed is logged and skipped, so one bad source only means fewer
endpoints in the catalog.
"""

import logging
from pathlib import Path

import httpx
import yaml

from api_term.errors import SpecLoadError
from api_term.parser.base import Endpoint
from api_term.parser.detect import detect_version
from api_term.parser.swagger import parse_document

logger = logging.getLogger(__name__)


def load_catalog(
    files: list[str],
    urls: list[str],
    client: httpx.Client | None = None,
    sort: bool = False,
) -> list[Endpoint]:
    """Load endpoints from every file and URL, in that order."""
    endpoints: list[Endpoint] = []

    for file_path in files:
        if not file_path:
            continue
        try:
            endpoints.extend(load_file(Path(file_path)))
        except SpecLoadError as e:
            logger.warning("Failed to load file %s: %s", file_path, e)

    if urls:
        owns_client = client is None
        client = client or httpx.Client(follow_redirects=True)
        try:
            for url in urls:
                if not url:
                    continue
                try:
                    endpoints.extend(load_url(url, client))
                except SpecLoadError as e:
                    logger.warning("Failed to load URL %s: %s", url, e)
        finally:
            if owns_client:
                client.close()

    if sort:
        endpoints.sort(key=lambda ep: (ep.path, ep.method))
    return endpoints


def load_file(file_path: Path) -> list[Endpoint]:
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SpecLoadError(str(e)) from e
    return _parse_text(text, str(file_path))


def load_url(url: str, client: httpx.Client) -> list[Endpoint]:
    try:
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise SpecLoadError(str(e)) from e
    return _parse_text(response.text, url)


def _parse_text(text: str, source: str) -> list[Endpoint]:
    # JSON is a subset of YAML, so one parser covers both formats.
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SpecLoadError(f"invalid YAML/JSON: {e}") from e
    if not isinstance(doc, dict):
        raise SpecLoadError("document is not a mapping")

    if detect_version(doc) is None:
        logger.warning("Validation warning: %s is not an OpenAPI 3 or Swagger 2 document", source)
    if not isinstance(doc.get("paths"), dict):
        logger.warning("Validation warning: %s declares no paths", source)

    try:
        endpoints = parse_document(doc)
    except (AttributeError, TypeError, ValueError) as e:
        raise SpecLoadError(f"malformed document: {e}") from e
    logger.debug("Loaded %d endpoints from %s", len(endpoints), source)
    return endpoints
