"""
Errors raised by the recommendation runner.

Pure scoring never raises; these cover the lookups and access rules the
runner enforces before scoring. `code` is meant to be mapped onto a
transport's own error responses.
"""


class MatchingError(Exception):
    code = "INTERNAL"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TravelerAccessError(MatchingError):
    """The requesting user is not a traveler with a profile."""
    code = "FORBIDDEN"

    def __init__(self, message: str = "Only travelers can request guide matching."):
        super().__init__(message)


class GuideNotFoundError(MatchingError):
    """The requested guide does not exist or has no guide profile."""
    code = "NOT_FOUND"

    def __init__(self, message: str = "Guide not found."):
        super().__init__(message)
