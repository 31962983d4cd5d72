"""Error types for the no-sale-item discount function."""

from typing import Optional


class DiscountError(Exception):
    """Base class for discount function errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class InvalidConfigurationError(DiscountError):
    """Configuration metafield could not be interpreted."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(f"invalid configuration: {message}", cause)


class InvalidInputError(DiscountError):
    """Function input is not a well-typed request."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(f"invalid input: {message}", cause)
