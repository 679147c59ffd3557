"""Custom exception hierarchy for Starlikers."""

from typing import Any

from starlikers.core.messages import DEFAULT_LOCALE, user_message_for


class StarlikersError(Exception):
    """Base exception for all Starlikers errors."""

    pass


class ConfigError(StarlikersError):
    """Configuration-related errors."""

    pass


class ValidationError(StarlikersError):
    """User input rejected before any request was made."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


class ApiError(StarlikersError):
    """Astronomy API failures.

    A ``status_code`` of 0 means no HTTP response was received at all
    (DNS, TLS, connection or read failure).
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        status_text: str = "",
        body: Any = None,
    ):
        self.status_code = status_code
        self.status_text = status_text
        self.body = body if body is not None else {}
        super().__init__(message)

    @property
    def user_message(self) -> str:
        """User-facing message in the default locale."""
        return self.get_user_message()

    def get_user_message(self, locale: str = DEFAULT_LOCALE) -> str:
        """Get a user-facing message derived from the status code.

        Args:
            locale: Message locale ("en" or "pt-BR")

        Returns:
            Message suitable for display
        """
        return user_message_for(self.status_code, locale, fallback=str(self))

    def details(self, locale: str = DEFAULT_LOCALE) -> dict[str, Any]:
        """Get detailed error information."""
        return {
            "message": str(self),
            "status": self.status_code,
            "statusText": self.status_text,
            "details": self.body,
            "userMessage": self.get_user_message(locale),
        }


class InvalidResponseError(ApiError):
    """A successful response that lacks the expected image URL."""

    def __init__(self, message: str, body: Any = None, field_path: str | None = None):
        self.field_path = field_path
        super().__init__(
            message,
            status_code=200,
            status_text="Invalid Response",
            body=body,
        )

    def get_user_message(self, locale: str = DEFAULT_LOCALE) -> str:
        return user_message_for("invalid_response", locale, fallback=str(self))


class CatalogNotFoundError(StarlikersError):
    """Constellation or preset not found in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Not found in catalog: {name}")
