class SkyPulseError(Exception):
    """Base error for everything the API reports as `{"error": ...}`."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(SkyPulseError):
    """A required query parameter is missing or empty."""
    status_code = 400


class UpstreamError(SkyPulseError):
    """The weather provider failed (transport error or non-success status)."""
    status_code = 500


class ShapingError(UpstreamError):
    """The provider payload could not be normalized."""
