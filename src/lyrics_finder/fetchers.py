"""HTTP page fetcher."""

from __future__ import annotations

import logging
from http.cookiejar import DefaultCookiePolicy

from requests import Session
from requests.adapters import HTTPAdapter
from requests.exceptions import RequestException
from urllib3.util.retry import Retry

from .models import FetchNotFound, FetchOk, FetchOutcome, FetchTransientError
from .validation import is_supported_url


def make_session(headers: dict[str, str], *, max_redirects: int) -> Session:
    """Create a requests session with browser headers, a redirect cap and no retries."""
    session = Session()
    session.headers.update(headers)
    session.max_redirects = max_redirects
    # nothing is remembered between page requests
    session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
    adapter = HTTPAdapter(max_retries=Retry(total=0, redirect=False, raise_on_status=False))
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


class RequestsFetcher:
    """Requests-based fetcher issuing exactly one GET per call."""

    def __init__(
        self,
        *,
        session: Session,
        timeout: float,
        logger: logging.Logger,
    ) -> None:
        self._session = session
        self._timeout = timeout
        self._logger = logger

    def fetch(self, url: str) -> FetchOutcome:
        if not is_supported_url(url):
            self._logger.debug("Skipping unsupported URL: %s", url)
            return FetchTransientError(cause=f"unsupported URL: {url}")
        try:
            response = self._session.get(url, timeout=self._timeout, allow_redirects=True)
        except RequestException as exc:
            self._logger.debug("Requests fetch failed for %s: %s", url, exc)
            return FetchTransientError(cause=str(exc))
        if response.status_code == 404:
            return FetchNotFound()
        if not 200 <= response.status_code < 300:
            self._logger.debug("Bad status for %s: %s", url, response.status_code)
            return FetchTransientError(cause=f"HTTP {response.status_code}")
        if "charset" not in response.headers.get("Content-Type", "").lower():
            # requests assumes ISO-8859-1 for text/html without a charset
            response.encoding = response.apparent_encoding
        return FetchOk(html=str(response.text))
