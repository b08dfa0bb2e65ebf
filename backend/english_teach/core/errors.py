class EnglishTeachError(Exception):
    """Base class for every error raised by the game core."""


class ValidationError(EnglishTeachError):
    """A required field is missing or empty."""


class NotFound(EnglishTeachError):
    """A list or word id does not exist."""


class InvalidBackup(ValidationError):
    """A backup document is malformed or misses one of its sections."""


class BackendUnavailable(EnglishTeachError):
    """The data backend could not be reached (network or file failure)."""


class TranslationFailure(EnglishTeachError):
    """The external translation lookup failed."""


class InsufficientData(EnglishTeachError):
    """Not enough translated words to start a quiz session."""
