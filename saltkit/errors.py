class SaltKitError(Exception):
    """Base class for saltkit-specific errors."""


# Argument validation
class InvalidRange(SaltKitError, ValueError):
    pass


class InvalidSaltLength(SaltKitError, ValueError):
    pass


# Platform entropy
class EntropyUnavailable(SaltKitError):
    pass
