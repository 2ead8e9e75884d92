"""Exceptions raised by the repository client."""

from typing import Optional


class NexusError(Exception):
    """Base class for repository client errors."""


class RequestError(NexusError):
    """A request failed in transport or returned an unexpected status.

    Attributes:
        name: Repository the request was about
        status_code: HTTP status, or None if no response was received
        body: Raw response body (or the transport error text)
    """

    def __init__(
        self,
        action: str,
        name: str,
        status_code: Optional[int] = None,
        body: str = "",
    ):
        self.action = action
        self.name = name
        self.status_code = status_code
        self.body = body

        target = f"repository '{name}'" if name else "repositories"
        if status_code is None:
            message = f"could not {action} {target}: {body}"
        else:
            message = f"could not {action} {target}: HTTP: {status_code}, {body}"
        super().__init__(message)


class DecodeError(NexusError):
    """A response body could not be decoded into repositories."""
