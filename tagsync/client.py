"""Remote tag client bindings.

Backends wrap a boto3 client that is normally built elsewhere (session,
credentials and botocore ``Config`` timeouts belong to the caller).
``client_for_service`` falls back to a default-chain client for the
configured region when none is given.
Extra keyword arguments given to ``list_tags``/``get_tag`` are passed to
the underlying API call unchanged.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import boto3

from .config import MAX_TAG_PAGES, Settings, load_settings
from .errors import KeyNotFoundError, TagSyncError, UnsupportedServiceError
from .tagset import TagSet

log = logging.getLogger("tagsync.client")


class TagClient(ABC):
    """Capability to read the tags of one remote resource."""

    name = "tags"

    @classmethod
    def from_settings(cls, client: Any, settings: Settings) -> "TagClient":
        return cls(client)

    @abstractmethod
    def list_tags(self, identifier: str, **call_options) -> Dict[str, str]:
        """Return every tag on the resource as a plain mapping."""
        pass

    def get_tag(self, identifier: str, key: str, **call_options) -> str:
        """Return one tag value, raising KeyNotFoundError when the key is absent.

        The default lists all tags and filters locally. Backends with a real
        single-key lookup should override this and keep the same contract.
        """
        tags = TagSet(self.list_tags(identifier, **call_options))
        if not tags.key_exists(key):
            raise KeyNotFoundError(identifier, key)
        return tags.key_value(key)


# ----------------------------
# Timestream for InfluxDB
# ----------------------------
class TimestreamInfluxDBTagClient(TagClient):
    """ListTagsForResource on a ``timestream-influxdb`` client."""

    name = "timestream-influxdb"
    token_fields = ("nextToken", "NextToken")

    def __init__(self, client: Any, max_pages: int = MAX_TAG_PAGES):
        self.client = client
        self.max_pages = max_pages

    @classmethod
    def from_settings(cls, client: Any, settings: Settings) -> "TimestreamInfluxDBTagClient":
        return cls(client, max_pages=settings.max_pages)

    def list_tags(self, identifier: str, **call_options) -> Dict[str, str]:
        tags: Dict[str, str] = {}
        params = dict(call_options, resourceArn=identifier)
        pages = 0
        while True:
            resp = self.client.list_tags_for_resource(**params)
            pages += 1
            tags.update(resp.get("tags") or {})
            token = next((resp[f] for f in self.token_fields if resp.get(f)), None)
            if not token:
                break
            if pages >= self.max_pages:
                raise TagSyncError(
                    f"tag listing for {identifier} still paginating after {pages} pages")
            log.debug("Continuing tag listing for %s (page %d)", identifier, pages + 1)
            params["nextToken"] = token
        log.debug("Listed %d tags for %s", len(tags), identifier)
        return tags


# ----------------------------
# Resource Groups Tagging API
# ----------------------------
class ResourceGroupsTaggingClient(TagClient):
    """GetResources on a ``resourcegroupstaggingapi`` client.

    An ARN list cannot be combined with pagination parameters, so one call
    returns everything for the resource.
    """

    name = "resourcegroupstaggingapi"

    def __init__(self, client: Any):
        self.client = client

    def list_tags(self, identifier: str, **call_options) -> Dict[str, str]:
        resp = self.client.get_resources(ResourceARNList=[identifier], **call_options)
        for r in resp.get("ResourceTagMappingList", []):
            if r.get("ResourceARN") == identifier:
                return TagSet.from_aws_list(r.get("Tags")).to_dict()
        log.debug("No tag mapping returned for %s", identifier)
        return {}


_BACKENDS = {
    TimestreamInfluxDBTagClient.name: TimestreamInfluxDBTagClient,
    ResourceGroupsTaggingClient.name: ResourceGroupsTaggingClient,
}


def client_for_service(service_name: Optional[str] = None, boto_client: Any = None,
                       settings: Optional[Settings] = None) -> TagClient:
    """Wrap ``boto_client`` in the backend matching its boto3 service name.

    ``service_name`` defaults to ``settings.service``; settings default to
    ``load_settings()``. Without ``boto_client`` a client is created for
    ``settings.region`` from the default credential chain.
    """
    settings = settings or load_settings()
    service_name = service_name or settings.service
    try:
        backend = _BACKENDS[service_name]
    except KeyError:
        raise UnsupportedServiceError(
            f"no tag client for service {service_name!r}; "
            f"supported: {', '.join(sorted(_BACKENDS))}")
    if boto_client is None:
        log.debug("Creating %s client in %s", service_name, settings.region)
        boto_client = boto3.client(service_name, region_name=settings.region)
    return backend.from_settings(boto_client, settings)
