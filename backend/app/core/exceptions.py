"""Domain errors shared by the repository, services and API layers."""


class ClinicDirectoryError(Exception):
    """Base class for every error raised by this service."""


class ConfigurationError(ClinicDirectoryError):
    """Required provider credentials are missing. Fatal at startup."""


class NotFoundError(ClinicDirectoryError):
    pass


class AuthorizationError(ClinicDirectoryError):
    """Operation attempted without a signed-in identity."""


class ForbiddenError(AuthorizationError):
    """Signed in, but not the owner of the record."""


class ProviderError(ClinicDirectoryError):
    """Firestore or Storage failed. The original detail is only logged."""
