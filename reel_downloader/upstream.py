"""RapidAPI client for the instagram-reels-downloader-api service."""

import logging
from typing import Any, Optional

import requests

from .errors import ConfigurationError, UpstreamError, UpstreamNotFound, UpstreamUnavailable

logger = logging.getLogger(__name__)

RAPIDAPI_HOST = "instagram-reels-downloader-api.p.rapidapi.com"


class UpstreamClient:
    """One GET per call against ``https://<host>/download``. No retries, no timeout."""

    def __init__(self, api_key: Optional[str], host: str = RAPIDAPI_HOST,
                 session: Optional[requests.Session] = None):
        if not api_key:
            raise ConfigurationError()
        self.api_key = api_key
        self.host = host
        self.session = session

    @property
    def endpoint(self) -> str:
        return f"https://{self.host}/download"

    def build_headers(self) -> dict:
        return {
            "X-RapidAPI-Key": self.api_key,
            "X-RapidAPI-Host": self.host,
            "Accept": "application/json",
            "Cache-Control": "no-cache",
        }

    def fetch(self, url: str) -> Any:
        # an injected session belongs to the caller; one created here is closed here
        session = self.session if self.session is not None else requests.Session()
        try:
            response = session.get(self.endpoint, params={"url": url}, headers=self.build_headers())
        except requests.RequestException as exc:
            logger.error("RapidAPI fetch error for %s: %s", url, exc)
            raise UpstreamUnavailable() from exc
        finally:
            if self.session is None:
                session.close()

        if not 200 <= response.status_code < 300:
            logger.error("RapidAPI error %s %s", response.status_code, response.text)
            if response.status_code == 404:
                raise UpstreamNotFound()
            raise UpstreamError()

        try:
            return response.json()
        except ValueError as exc:
            logger.error("RapidAPI returned non-JSON body (%s): %.200s", response.status_code, response.text)
            raise UpstreamError() from exc
