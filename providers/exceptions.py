class ProviderError(Exception):
    """Base class for failures talking to a third-party data provider."""


class TransportFailure(ProviderError):
    """Raised when a provider cannot be reached or answers with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedRecord(ProviderError):
    """Raised when a provider response is not valid JSON or misses an expected field."""
