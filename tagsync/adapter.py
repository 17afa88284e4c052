"""Tag adapter used by the resource lifecycle driver.

Reads remote tags into a TagSet, answers single-key probes, and moves tags
through the TagContext of the current operation. It decides nothing about
which tags should exist; that is the diff/apply engine's job.

Remote errors are re-raised exactly as the client raised them so the
driver's retry classification keeps working.
"""

import logging
from typing import Dict, Mapping, Optional

from .client import TagClient
from .context import TagContext
from .errors import TagContextError
from .tagset import TagSet

log = logging.getLogger("tagsync.adapter")


def key_value_tags(tags: Optional[Mapping[str, str]]) -> TagSet:
    return TagSet(tags)


def tags_to_map(tags: TagSet) -> Dict[str, str]:
    """Raw mapping for the driver's resource state."""
    return tags.to_dict()


class TagAdapter:

    def __init__(self, client: TagClient):
        self.client = client

    def fetch_tag_set(self, identifier: str, **call_options) -> TagSet:
        try:
            raw = self.client.list_tags(identifier, **call_options)
        except Exception as e:
            log.debug("Listing %s tags for %s failed: %s", self.client.name, identifier, e)
            raise
        return key_value_tags(raw)

    def get_single_tag(self, identifier: str, key: str, **call_options) -> str:
        """Value of tag ``key``; KeyNotFoundError when the resource lacks it."""
        return self.client.get_tag(identifier, key, **call_options)

    def publish_observed(self, ctx: Optional[TagContext], identifier: str,
                         **call_options) -> None:
        """Fetch tags and store them as the operation's observed tags.

        Without a context there is nowhere to publish, which is not an error.
        The context is left untouched when the fetch fails. Publishing is
        allowed once per context; use write_observed to replace tags.
        """
        if ctx is not None:
            ctx.bind(identifier)
            if ctx.observed is not None:
                raise TagContextError(f"observed tags already published for {identifier}")
        tags = self.fetch_tag_set(identifier, **call_options)
        if ctx is not None:
            ctx.observed = tags

    def read_declared(self, ctx: Optional[TagContext]) -> Dict[str, str]:
        if ctx is None or ctx.declared is None:
            return {}
        return tags_to_map(ctx.declared)

    def write_observed(self, ctx: Optional[TagContext],
                       tags: Optional[Mapping[str, str]]) -> None:
        """Store tags that came back with another read of the resource."""
        if ctx is not None:
            ctx.observed = key_value_tags(tags)
