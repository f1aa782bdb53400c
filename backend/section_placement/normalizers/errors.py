class PayloadError(ValueError):
    """A request body is missing fields or carries values of the wrong shape."""
