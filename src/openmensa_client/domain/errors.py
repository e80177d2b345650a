"""Errors raised by the OpenMensa client."""


class OpenMensaError(Exception):
    """Base class for OpenMensa client failures."""

    def __init__(self, message: str, url: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.cause = cause


class TransportError(OpenMensaError):
    """Request could not be completed (network, timeout, TLS or redirects)."""

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(f"Request to {url} failed: {cause}", url, cause)


class DecodeError(OpenMensaError):
    """Response body could not be decoded into the expected shape.

    ``status_code`` is None when the body failed to decompress before a
    response was available.
    """

    def __init__(self, url: str, status_code: int | None, cause: Exception) -> None:
        super().__init__(
            f"Could not decode response from {url} (status={status_code}): {cause}",
            url,
            cause,
        )
        self.status_code = status_code
