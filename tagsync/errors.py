"""Exceptions raised by tagsync.

Remote failures are not wrapped: whatever the boto3 client raises
(``ClientError`` for service errors, ``BotoCoreError`` for transport and
credential problems) reaches the caller untouched.
"""

from botocore.exceptions import BotoCoreError, ClientError

# Errors a remote tag listing may raise, for callers that classify them.
REMOTE_FETCH_ERRORS = (ClientError, BotoCoreError)


class TagSyncError(Exception):
    """Base class for errors raised by this package."""


class KeyNotFoundError(TagSyncError, KeyError):
    """The resource was read but carries no tag with the requested key."""

    def __init__(self, identifier: str, key: str):
        self.identifier = identifier
        self.key = key
        super().__init__(identifier, key)

    def __str__(self) -> str:
        return f"tag {self.key!r} not found on {self.identifier}"


class TagContextError(TagSyncError):
    """A TagContext was used outside its operation or written twice."""


class UnsupportedServiceError(TagSyncError, ValueError):
    """No tag client backend exists for a service name."""
