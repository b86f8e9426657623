"""Domain exceptions."""


class InvalidArgument(ValueError):
    """Raised when a caller-supplied value violates a domain precondition."""
