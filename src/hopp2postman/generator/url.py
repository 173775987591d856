"""Endpoint decomposition into Postman's host / path / query URL form.

Hoppscotch endpoints often start with a variable instead of a real
authority (``<<baseUrl>>/users``). Those are resolved against a placeholder
base so the query string can still be parsed, and the variable token is kept
verbatim as the single host segment.
"""

import logging
from urllib.parse import SplitResult, parse_qsl, urljoin, urlsplit

from .models import KeyValue, PostmanUrl

logger = logging.getLogger(__name__)

PLACEHOLDER_BASE = "https://example.com"

# Characters a browser URL parser rejects in a host name.
FORBIDDEN_HOST_CHARS = frozenset(" \t\n\r<>^|\\")


def decompose_url(endpoint: str) -> PostmanUrl:
    """Split an endpoint into Postman URL parts.

    ``raw`` is the endpoint unchanged; variable rewriting is left to the caller.
    Raises ValueError if the endpoint can be parsed neither as an absolute URL
    nor relative to the placeholder base.
    """
    parts = _parse_absolute(endpoint)
    used_placeholder = parts is None
    if used_placeholder:
        logger.debug("Endpoint %r is not an absolute URL, resolving against %s", endpoint, PLACEHOLDER_BASE)
        parts = urlsplit(urljoin(PLACEHOLDER_BASE, endpoint))

    location = _strip_query(endpoint)
    path = _segments(location)
    if used_placeholder:
        # The unresolvable authority becomes the single host token.
        host = [location.split("/")[0]]
        path = path[1:]
    else:
        host = (parts.hostname or "").split(".")

    query = [KeyValue(key=k, value=v) for k, v in parse_qsl(parts.query, keep_blank_values=True)]

    return PostmanUrl(raw=endpoint, host=host, path=path, query=query)


def _parse_absolute(endpoint: str) -> SplitResult | None:
    """Return the split URL, or None when endpoint has no scheme and a valid authority."""
    try:
        parts = urlsplit(endpoint)
    except ValueError:
        return None
    if not (parts.scheme and parts.netloc):
        return None
    if FORBIDDEN_HOST_CHARS.intersection(parts.hostname or ""):
        return None
    return parts


def _strip_query(endpoint: str) -> str:
    return endpoint.split("#", 1)[0].split("?", 1)[0]


def _segments(path: str) -> list[str]:
    return [s for s in path.split("/") if s]
