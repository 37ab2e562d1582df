class InvalidArgumentError(ValueError):
    """Raised when an argument is outside the range an operation accepts."""
