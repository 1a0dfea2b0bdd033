"""Exceptions raised by the LUIS client.

Failures from the HTTP layer (connection errors, HTTP status errors, invalid
JSON bodies) are not wrapped; they surface as the ``requests`` exceptions
that caused them.
"""


class LuisError(Exception):
    """Base class for errors raised by this package."""


class UnsupportedVersionError(LuisError):
    """The requested API version has no endpoint.

    Only raised when the dispatcher is called directly with a version that
    the application factory never produces.
    """


class LuisResponseError(LuisError, ValueError):
    """The response body does not match the expected result shape."""
