class DPRNGError(Exception):
    """Base class for dprng-specific errors."""


class InvalidArgument(DPRNGError, ValueError):
    """Bounds, counts or seeds outside what the generator accepts."""


class EntropyUnavailable(DPRNGError):
    """No seed was given and the entropy source could not provide one."""
