"""Error taxonomy for the match-history pipeline.

Every failure of a single HTTP request is a ``FetchError``; it is terminal
for that request (nothing in the pipeline retries). ``ParticipantNotFound``
is the one application-level failure and is a kind of ``DecodeError``.
"""
from typing import Optional


class RiftError(Exception):
    """Base class for all errors raised by this package."""


class FetchError(RiftError):
    """A single request could not produce a usable document."""

    def __init__(self, message: str, *, url: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.url = url
        self.cause = cause


class NetworkError(FetchError):
    """Transport failure: DNS, connection reset, timeout."""


class HttpStatusError(FetchError):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int, *, url: Optional[str] = None):
        super().__init__(f"HTTP {status_code}", url=url)
        self.status_code = status_code


class EmptyBody(FetchError):
    """A successful response carried no body."""

    def __init__(self, *, url: Optional[str] = None):
        super().__init__("empty response body", url=url)


class DecodeError(FetchError):
    """The body was not valid JSON or did not match the expected schema."""


class ParticipantNotFound(DecodeError):
    """The target player does not appear in ``info.participants``."""

    def __init__(self, match_id: str, puuid: str):
        super().__init__(f"participant not found in {match_id}")
        self.match_id = match_id
        self.puuid = puuid


class UnsupportedRegionError(RiftError, ValueError):
    """A region name has no routing region."""

    def __init__(self, region: str):
        super().__init__(f"Unsupported region: {region!r}")
        self.region = region


class InvalidRiotIdError(RiftError, ValueError):
    """Search text is not of the form ``name#tag``."""

    def __init__(self, query: str):
        super().__init__("Invalid format! Use the format: name#tag")
        self.query = query
