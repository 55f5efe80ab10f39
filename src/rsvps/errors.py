class RSVPError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = 500


class ValidationError(RSVPError):
    """Raised when a submission is malformed. Client-caused."""

    status_code = 400


class AuthError(RSVPError):
    """Raised when the admin credential is missing or wrong."""

    status_code = 401


class ConfigError(RSVPError):
    """Raised when the server is misconfigured, e.g. no admin secret."""

    status_code = 500


class StorageError(RSVPError):
    """Raised when a record cannot be persisted or read back."""

    status_code = 500
