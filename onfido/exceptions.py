class OnfidoError(Exception):
    """Base exception for all errors raised by the Onfido client."""


class OnfidoEncodingError(OnfidoError):
    """Raised when a request body cannot be built before sending."""


class OnfidoTransportError(OnfidoError):
    """Raised when the HTTP call fails due to network/infrastructure issues."""


class OnfidoTimeoutError(OnfidoTransportError):
    """Raised when the HTTP call does not complete within its timeout."""


class OnfidoDecodeError(OnfidoError):
    """Raised when a successful response body cannot be decoded."""


class OnfidoAPIError(OnfidoError):
    """Raised when the API answers with a non-2xx status code."""

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        error_type: str = "",
        fields: dict[str, object] | None = None,
        error_id: str = "",
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.error_type = error_type
        self.fields = fields or {}
        self.error_id = error_id
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.error_type:
            return f"{self.status_code} {self.error_type}: {self.message}"
        return f"{self.status_code}: {self.message}"
