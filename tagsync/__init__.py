"""Tag reconciliation adapter for Timestream for InfluxDB resources."""

from .adapter import TagAdapter, key_value_tags, tags_to_map
from .client import (ResourceGroupsTaggingClient, TagClient,
                     TimestreamInfluxDBTagClient, client_for_service)
from .context import TagContext, tag_context
from .errors import (REMOTE_FETCH_ERRORS, KeyNotFoundError, TagContextError,
                     TagSyncError, UnsupportedServiceError)
from .tagset import TagSet

__version__ = "0.1.0"

__all__ = [
    "KeyNotFoundError",
    "REMOTE_FETCH_ERRORS",
    "ResourceGroupsTaggingClient",
    "TagAdapter",
    "TagClient",
    "TagContext",
    "TagContextError",
    "TagSet",
    "TagSyncError",
    "TimestreamInfluxDBTagClient",
    "UnsupportedServiceError",
    "client_for_service",
    "key_value_tags",
    "tag_context",
    "tags_to_map",
]
