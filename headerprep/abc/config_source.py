"""Capability interface for looking up string configuration values by key."""

from typing import Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class ConfigSource(Protocol):
    """Anything that returns a configured string for a key, or None if it is absent."""

    def get(self, key: str) -> Optional[str]: ...  # pragma: no cover


class MappingConfigSource:
    """Adapter exposing a plain mapping, e.g. a component configuration, as
    a :class:`ConfigSource`. Values are converted to strings, absent keys and
    :code:`None` values are reported as absent."""

    __slots__ = ["_mapping"]

    def __init__(self, mapping: Mapping):
        self._mapping = mapping

    def get(self, key: str) -> Optional[str]:
        value = self._mapping.get(key)
        if value is None:
            return None
        return str(value)
