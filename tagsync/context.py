"""Per-operation handoff of declared and observed tags.

A TagContext is created by the lifecycle driver for one operation on one
resource and passed explicitly to every adapter call. It is never stored
globally and cannot be copied, so two operations cannot end up sharing one.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

from .errors import TagContextError
from .tagset import TagSet

log = logging.getLogger("tagsync.context")


class TagContext:
    """Declared ("in") and observed ("out") tags for a single operation."""

    __slots__ = ("identifier", "_declared", "_observed", "_closed")

    def __init__(self, identifier: Optional[str] = None):
        self.identifier = identifier
        self._declared: Optional[TagSet] = None
        self._observed: Optional[TagSet] = None
        self._closed = False

    def _check_open(self) -> None:
        if self._closed:
            raise TagContextError(f"tag context for {self.identifier or 'resource'} is closed")

    @property
    def declared(self) -> Optional[TagSet]:
        self._check_open()
        return self._declared

    def declare(self, tags: Optional[Mapping[str, str]]) -> None:
        """Record the configured tags. Allowed once per operation."""
        self._check_open()
        if self._declared is not None:
            raise TagContextError("declared tags already set for this operation")
        self._declared = TagSet(tags)

    @property
    def observed(self) -> Optional[TagSet]:
        self._check_open()
        return self._observed

    @observed.setter
    def observed(self, tags: TagSet) -> None:
        self._check_open()
        if self._observed is not None:
            log.debug("Replacing observed tags for %s", self.identifier)
        self._observed = tags

    def bind(self, identifier: str) -> None:
        """Check that ``identifier`` is the resource this context was opened for."""
        self._check_open()
        if self.identifier is None:
            return
        if identifier != self.identifier:
            raise TagContextError(
                f"tag context for {self.identifier} used for {identifier}")

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    def __copy__(self):
        raise TypeError("TagContext belongs to one operation and cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("TagContext belongs to one operation and cannot be copied")

    def __reduce_ex__(self, protocol):
        raise TypeError("TagContext cannot be pickled")

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<TagContext {self.identifier or '-'} {state}>"


@contextmanager
def tag_context(identifier: Optional[str] = None,
                declared: Optional[Mapping[str, str]] = None) -> Iterator[TagContext]:
    """Open a context for one operation and close it when the block exits."""
    ctx = TagContext(identifier)
    if declared:
        ctx.declare(declared)
    try:
        yield ctx
    finally:
        ctx.close()
