"""Error taxonomy shared by services and the HTTP layer."""


class GalleryError(Exception):
    """Base error carrying a client-facing message and HTTP status."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(GalleryError):
    """Missing or malformed input."""

    status_code = 400


class ConflictError(GalleryError):
    """A unique field (username or email) is already taken."""

    status_code = 400


class AuthError(GalleryError):
    """Bad credentials or a missing/expired session."""

    status_code = 401


class NotFoundError(GalleryError):
    """The requested resource does not exist."""

    status_code = 404


class InternalError(GalleryError):
    """A store or network failure."""

    status_code = 500
