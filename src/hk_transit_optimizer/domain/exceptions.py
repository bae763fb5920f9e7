"""Exceptions raised across the optimizer."""


class TransitOptimizerError(Exception):
    """Base error carrying a machine readable code."""

    def __init__(self, message: str, code: str = "INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(message)


class InvalidRequestError(TransitOptimizerError):
    """The request itself is malformed; nothing external was called."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INVALID_REQUEST")


class GeocodingError(TransitOptimizerError):
    """A location could not be placed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="GEOCODING_FAILED")


class FeedLoadError(TransitOptimizerError):
    """The transit feed could not be fetched or is missing a table."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="FEED_LOAD_FAILED")

