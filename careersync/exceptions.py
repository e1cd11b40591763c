class CareerSyncError(Exception):
    """Base class for every error raised by careersync"""


class InvalidInputError(CareerSyncError, ValueError):
    """Raised when a required text field is missing or is not a string"""


class ExtractionError(CareerSyncError):
    """Raised when text cannot be extracted from a resume document.

    Callers get this instead of an empty string so that a broken upload
    is never scored as an empty resume.
    """


class ConfigurationError(CareerSyncError):
    """Raised when settings are missing or malformed"""


class ProviderError(CareerSyncError, RuntimeError):
    """Raised when the generative analysis backend fails permanently"""


class TransientProviderError(ProviderError):
    """Raised for backend failures worth retrying (timeouts, 429, 5xx)."""
