"""Error types for board insights."""


class InsightsError(Exception):
    """Base error for insight operations."""
    pass


class ConfigurationError(InsightsError):
    """The API key is missing or empty."""
    pass


class NetworkError(InsightsError):
    """Transport failure talking to the model API."""
    pass


class ApiError(InsightsError):
    """Model API answered with a non-success status."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(InsightsError):
    """Model reply did not match the expected structure."""

    def __init__(self, message: str, raw_text: str = None):
        super().__init__(message)
        self.raw_text = raw_text
