"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class InvalidArgumentError(ApplicationError, ValueError):
    """Raised when a caller passes a value outside the accepted domain (quantity <= 0, capacity <= 0, ...)."""

    def __init__(self, message: str = "Invalid argument", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Invalid Argument: {message}"


class NotFoundError(ApplicationError):
    """Raised when an item, distributor or inventory record does not exist."""

    def __init__(self, message: str = "Resource not found", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Not Found: {message}"


class NoOffersError(ApplicationError):
    """Raised when an item exists but no distributor currently sells it."""

    def __init__(self, item_id: int, original_exception: Exception | None = None) -> None:
        super().__init__(f"No distributors found for item ID {item_id}", original_exception)
        self.item_id = item_id


class ConflictError(ApplicationError):
    """Raised when a write would violate a uniqueness constraint."""

    def __init__(self, message: str = "Resource already exists", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Conflict: {message}"


class UpstreamUnavailableError(ApplicationError):
    """Raised when the backing store or remote API cannot serve a request."""

    def __init__(self, message: str = "Upstream unavailable", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)


class APIError(UpstreamUnavailableError):
    """Exception raised for errors during external API calls."""

    def __init__(
        self,
        message: str = "API call failed",
        original_exception: Exception | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, original_exception)
        self.status_code = status_code
        self.message = f"API Error: {message}"
        if status_code:
            self.message += f" (Status Code: {status_code})"


class DatabaseError(UpstreamUnavailableError):
    """Exception raised for errors during database operations."""

    def __init__(self, message: str = "Database operation failed", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Database Error: {message}"


class ReadOnlySourceError(ApplicationError):
    """Raised when a write or catalog-management call reaches a source that only serves lookups."""

    def __init__(self, message: str = "Source is read-only", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Read-Only Source: {message}"


class MalformedResponseError(ApplicationError):
    """Raised when a remote service answers, but with data that does not fit the expected shape."""

    def __init__(self, message: str = "Malformed response", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Malformed Response: {message}"
