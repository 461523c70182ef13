class CoopsError(Exception):
    """Base exception for NOAA CO-OPS API errors."""
    pass

class CoopsRequestError(CoopsError):
    """Raised when a request to CO-OPS fails or returns a non-2xx status."""
    pass

class CoopsResponseError(CoopsError):
    """Raised when CO-OPS answers with an error message in the payload."""
    pass
