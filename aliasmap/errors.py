class AliasMapError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgument(AliasMapError, ValueError):
    """A node was built with ``None`` in a mandatory field."""


class ConflictError(AliasMapError, ValueError):
    """A label is already bound to a different entry or role."""
