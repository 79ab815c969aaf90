"""Event model handed to interceptors by the host pipeline."""

from typing import Dict

from attrs import define, field, validators


@define(kw_only=True)
class TextRecord:
    """A single event: a raw byte payload and a mutable map of string headers.

    Interceptors only add or overwrite entries in :code:`headers`, they never
    remove entries and never touch :code:`body`.
    """

    body: bytes = field(validator=validators.instance_of(bytes), default=b"")
    """The raw payload of the event"""
    headers: Dict[str, str] = field(
        validator=validators.deep_mapping(
            key_validator=validators.instance_of(str),
            value_validator=validators.instance_of(str),
            mapping_validator=validators.instance_of(dict),
        ),
        factory=dict,
    )
    """The metadata of the event"""

    @classmethod
    def from_text(cls, text: str, encoding: str = "utf-8", headers: dict = None) -> "TextRecord":
        """Create an event from a string body."""
        return cls(body=text.encode(encoding), headers=headers if headers is not None else {})
