class ApplicationError(Exception):
    """Base application-layer error, independent from transport concerns."""


class ConfigurationError(ApplicationError):
    """Raised when an endpoint is misconfigured, never because of client input."""
