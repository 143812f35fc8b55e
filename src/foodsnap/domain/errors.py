"""Domain error types."""


class FoodSnapError(Exception):
    """Base class for application errors."""


class ValidationError(FoodSnapError, ValueError):
    """Raised when a submitted profile field is missing or out of range."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class DivisionError(FoodSnapError, ArithmeticError):
    """Raised when a meal target is not positive."""


class DetectionError(FoodSnapError):
    """Raised when the detection supplier fails or returns unusable data."""


class DetectionRateLimitedError(DetectionError):
    """Raised when the inference provider rejects a request for rate limits."""
