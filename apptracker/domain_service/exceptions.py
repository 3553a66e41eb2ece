"""Domain service exceptions."""


class InvalidImageError(ValueError):
    """Raised when an uploaded image cannot be decoded or is too large."""

    pass
