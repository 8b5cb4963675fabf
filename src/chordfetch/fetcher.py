"""Blocking HTTP GET that sorts failures into transport, status and read errors."""

import httpx
from loguru import logger

from .exceptions import HTTPStatusError, ResponseReadError, TransportError
from .models import FetchedPage

DEFAULT_TIMEOUT = 15.0


def fetch_page(url: str, timeout: float = DEFAULT_TIMEOUT, client: httpx.Client | None = None) -> FetchedPage:
    """GET *url* and return the fully read response.

    The body is streamed so that a failure while reading it can be told apart
    from a failure to get a response at all.

    Raises TransportError, HTTPStatusError or ResponseReadError.
    """
    owns_client = client is None
    if owns_client:
        client = httpx.Client(follow_redirects=True, timeout=timeout)

    logger.info(f"Fetching {url}")
    try:
        with client.stream("GET", url) as resp:
            if not resp.is_success:
                raise HTTPStatusError(url, resp.status_code, resp.reason_phrase)
            try:
                content = resp.read()
                text = resp.text
            except (httpx.RequestError, httpx.StreamError, UnicodeDecodeError, LookupError) as exc:
                raise ResponseReadError(url, str(exc) or type(exc).__name__) from exc
            status_code = resp.status_code
    except (httpx.RequestError, httpx.InvalidURL, ValueError) as exc:
        # ValueError covers hostnames idna rejects, e.g. "http://xn--/"
        raise TransportError(url, str(exc) or type(exc).__name__) from exc
    finally:
        if owns_client:
            client.close()

    logger.info(f"Fetched {url} ({status_code}, {len(content)} bytes)")
    return FetchedPage(url=url, status_code=status_code, content=content, text=text)
