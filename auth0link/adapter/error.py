"""Infrastructure layer errors."""

# Messages for the statuses Auth0 documents. Anything else is unexpected.
API_ERROR_MESSAGES: dict[int, str] = {
    400: "The data sent was invalid",
    401: "Request unauthorized",
    403: "The request was forbidden or requires verification",
    404: "The requested resource could not be found",
    405: "Request method not allowed",
    429: "Too many attempts",
    500: "Internal server error",
    501: "Unsupported response or grant type",
    503: "The server is temporarily unavailable",
}

UNEXPECTED_STATUS_MESSAGE = "Unexpected response status"


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class TransportError(ProviderError):
    """The provider could not be reached (DNS, connect, timeout)."""

    pass


class ApiError(ProviderError):
    """The provider answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)

    @classmethod
    def from_status(cls, status_code: int) -> "ApiError":
        """Build the error for a status code using the fixed message table.

        Args:
            status_code: HTTP status returned by the provider

        Returns:
            ApiError carrying the table message, or the generic message for
            statuses outside the table
        """
        message = API_ERROR_MESSAGES.get(status_code, UNEXPECTED_STATUS_MESSAGE)
        return cls(status_code, message)

    @property
    def is_mapped(self) -> bool:
        return self.status_code in API_ERROR_MESSAGES


class ResponseDecodeError(ProviderError):
    """A provider response did not match the expected schema."""

    pass
