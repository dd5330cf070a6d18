"""Error taxonomy raised by the service layer.

Routers never build error responses themselves; they let these propagate to
the handlers registered in ``realty.api.errors``.
"""


class ServiceError(Exception):
    """Base exception for service errors."""


class RecordNotFoundError(ServiceError):
    """The record does not exist, the id is malformed, or the caller does not own it.

    All three cases produce the same response.
    """


class AuthenticationError(ServiceError):
    """The request carries no usable token."""


class InvalidCredentialsError(ServiceError):
    """Login failed: unknown email or wrong password."""


class DuplicateEmailError(ServiceError):
    """A user with this email already exists."""


class DependencyFailureError(ServiceError):
    """An external collaborator failed, timed out or returned garbage."""


class GeocodingError(DependencyFailureError):
    """The geocoder could not resolve an address."""
