class ChordFetchError(Exception):
    """Base exception for chordfetch."""


class FetchError(ChordFetchError):
    """Raised when a page cannot be retrieved."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(reason)


class TransportError(FetchError):
    """Raised when the request never produced a response (DNS, connect, TLS, timeout)."""


class HTTPStatusError(FetchError):
    """Raised when the server answers with a non-2xx status."""

    def __init__(self, url: str, status_code: int, reason_phrase: str = ""):
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        super().__init__(url, f"{status_code} {reason_phrase}".strip())


class ResponseReadError(FetchError):
    """Raised when the response body cannot be read or decoded."""


class SaveError(ChordFetchError):
    """Raised when the fetched body cannot be written to disk."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(reason)


class FileCreateError(SaveError):
    """Raised when the output file cannot be created or truncated."""


class FileWriteError(SaveError):
    """Raised when writing the body to the output file fails part-way."""
