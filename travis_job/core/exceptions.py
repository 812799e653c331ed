"""
Custom application exceptions.
"""


class JobError(Exception):
    """Base exception for Travis job errors."""
    pass


class ConfigError(JobError):
    """Required configuration is missing or malformed."""
    pass


class TravisAPIError(JobError):
    """Travis API call failed."""
    pass


class TransportError(TravisAPIError):
    """Request could not be sent or its response could not be read."""
    pass


class DecodeError(TravisAPIError):
    """Response body did not have the expected shape."""
    pass


class NotFoundError(TravisAPIError):
    """Status query returned no builds for the request."""
    pass


class BuildTimeoutError(JobError, TimeoutError):
    """Build did not reach a terminal state before the deadline."""
    pass
