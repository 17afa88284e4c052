"""Normalized tag container shared by every backend."""

from typing import Dict, Iterable, Iterator, List, Mapping, Optional


class TagSet:
    """Immutable key/value tags for one resource.

    Every key present has a value; there is no key-without-value state.
    """

    __slots__ = ("_tags",)

    def __init__(self, tags: Optional[Mapping[str, str]] = None):
        self._tags = {str(k): str(v) for k, v in (tags or {}).items()}

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, str]]) -> "TagSet":
        return cls(data)

    @classmethod
    def from_aws_list(cls, tags: Optional[Iterable[Dict[str, str]]],
                      key_field: str = "Key", value_field: str = "Value") -> "TagSet":
        """Build from the ``[{"Key": .., "Value": ..}]`` shape most AWS APIs return."""
        return cls({t[key_field]: t.get(value_field, "") for t in tags or []})

    def key_exists(self, key: str) -> bool:
        return key in self._tags

    def key_value(self, key: str) -> Optional[str]:
        return self._tags.get(key)

    def keys(self) -> List[str]:
        return list(self._tags)

    def to_dict(self) -> Dict[str, str]:
        return dict(self._tags)

    def __contains__(self, key) -> bool:
        return key in self._tags

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TagSet):
            return NotImplemented
        return self._tags == other._tags

    def __hash__(self):
        return hash(frozenset(self._tags.items()))

    def __repr__(self) -> str:
        return f"TagSet({self._tags!r})"
