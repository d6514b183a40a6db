"""Domain errors raised by application services."""


class UserAlreadyExistsError(Exception):
    """Raised when signing up with an email that is already registered."""


class InvalidCredentialsError(Exception):
    """Raised when an email and password pair does not match a user."""


class InvalidTokenError(Exception):
    """Raised when a bearer token is malformed, forged or expired."""


class FoodAlreadyExistsError(Exception):
    """Raised when a user defines a second food with the same name."""
