"""Error taxonomy shared across services and the HTTP layer."""


class PhotoShareError(Exception):
    """Base class for application errors."""


class DuplicateUsername(PhotoShareError):
    """Raised when registering a username that is already taken."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username '{username}' is already taken.")
        self.username = username


class InvalidCredentials(PhotoShareError):
    """Username or password did not match."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password.")


class Unauthenticated(PhotoShareError):
    """The request has no resolvable session."""


class Forbidden(PhotoShareError):
    """The current user does not own the resource."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class NotFound(PhotoShareError):
    """The requested resource does not exist."""


class UnsupportedMediaType(PhotoShareError):
    """Uploaded file is not one of the allowed image types."""

    def __init__(self, message: str = "Error: Images Only!") -> None:
        super().__init__(message)


class PersistenceFailure(PhotoShareError, RuntimeError):
    """A storage backend call failed. The cause is chained."""
