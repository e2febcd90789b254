"""
One request/response cycle: validate -> configure -> fetch -> sanitize.

Every failure is terminal and comes back as ``(status, {"error": message})``.
"""

import logging
from typing import Any, Callable, Optional, Tuple

from .errors import ReelError
from .sanitize import ReelResult, build_reel_result
from .upstream import UpstreamClient
from .validation import parse_reel_request

logger = logging.getLogger(__name__)

ClientFactory = Callable[[Optional[str]], UpstreamClient]


def fetch_reel(url: str, api_key: Optional[str],
               client_factory: ClientFactory = UpstreamClient) -> ReelResult:
    """Resolve an already validated link into a ReelResult. Raises ReelError."""
    client = client_factory(api_key)
    payload = client.fetch(url)
    return build_reel_result(payload, url)


def handle_reel_request(body: Any, api_key: Optional[str],
                        client_factory: ClientFactory = UpstreamClient) -> Tuple[int, dict]:
    try:
        request = parse_reel_request(body)
        result = fetch_reel(request.url, api_key, client_factory)
    except ReelError as exc:
        logger.info("Reel request failed with %s (%s)", exc.status, type(exc).__name__)
        payload, status = exc.to_response()
        return status, payload
    return 200, result.to_dict()
