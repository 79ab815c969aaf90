"""
Extraction Plan
^^^^^^^^^^^^^^^

The extraction plan is built once from the two configuration values of a
:code:`field_extractor` and is never changed afterwards.

:code:`delimiter`
    A regular expression the record body is split on, e.g. :code:`:` or :code:`\\t`.

:code:`headers`
    A comma separated list of :code:`<position>:<name>` tokens. The position is the
    0-based index into the split record, the name is the header the value is written to.

..  code-block:: yaml
    :linenos:
    :caption: Given field_extractor configuration

    delimiter: ":"
    headers: "0:headerA, 2:headerB"

..  code-block:: text
    :linenos:
    :caption: Incoming record body

    1:2:3.4foobar5

..  code-block:: json
    :linenos:
    :caption: Resulting headers

    {"headerA": "1", "headerB": "3.4foobar5"}

Positions are accepted as any integer, including negative ones. A position that
does not address an element of the split record is skipped at extraction time.
Only empty tokens at the end of the list, as left by a trailing comma, are ignored.
Any other empty or blank token is rejected.
"""

import logging
import re
from typing import Tuple

from attrs import define, field, validators

from headerprep.abc.config_source import ConfigSource
from headerprep.factory_error import ConfigError
from headerprep.util.defaults import (
    DELIMITER_KEY,
    HEADER_LIST_SEPARATOR,
    HEADER_NAME_SEPARATOR,
    HEADERS_KEY,
)

logger = logging.getLogger("ExtractionPlan")

POSITION_PATTERN = re.compile(r"[+-]?[0-9]+")


@define(frozen=True)
class FieldSpec:
    """A single position to header name assignment."""

    position: int = field(validator=validators.instance_of(int))
    """0-based index into the split record"""
    name: str = field(validator=[validators.instance_of(str), validators.min_len(1)])
    """header name the value is written to"""

    @classmethod
    def from_token(cls, token: str) -> "FieldSpec":
        """Parse one :code:`position:name` token.

        Raises
        ------
        ConfigError
            if the token has not exactly one separator, the position is no integer
            or the name is empty
        """
        token = token.strip()
        if token.count(HEADER_NAME_SEPARATOR) != 1:
            raise ConfigError("malformed field token", token)
        position, name = (part.strip() for part in token.split(HEADER_NAME_SEPARATOR, 1))
        if not POSITION_PATTERN.fullmatch(position):
            raise ConfigError("invalid position", token)
        if not name:
            raise ConfigError("invalid field name", token)
        return cls(int(position), name)


@define(frozen=True)
class ExtractionPlan:
    """The validated and compiled configuration of a field extractor."""

    delimiter_pattern: re.Pattern = field(validator=validators.instance_of(re.Pattern))
    """compiled delimiter the record body is split on"""
    fields: Tuple[FieldSpec, ...] = field(
        converter=tuple,
        validator=[
            validators.deep_iterable(member_validator=validators.instance_of(FieldSpec)),
            validators.min_len(1),
        ],
    )
    """field specifications in declared order"""

    @property
    def delimiter(self) -> str:
        """returns the raw delimiter pattern"""
        return self.delimiter_pattern.pattern


def parse_plan(delimiter: str, header_spec: str) -> ExtractionPlan:
    """Build an :class:`ExtractionPlan` from the raw delimiter and header specification.

    Parameters
    ----------
    delimiter: str
        the regular expression to split records on
    header_spec: str
        comma separated :code:`position:name` tokens

    Returns
    -------
    ExtractionPlan
        the validated plan

    Raises
    ------
    ConfigError
        if one of the values is missing or invalid
    """
    if not delimiter:
        raise ConfigError("missing delimiter")
    try:
        pattern = re.compile(delimiter)
    except re.error as error:
        raise ConfigError("invalid delimiter pattern", delimiter) from error
    if not header_spec or not header_spec.strip():
        raise ConfigError("missing headers")
    tokens = header_spec.split(HEADER_LIST_SEPARATOR)
    while tokens and not tokens[-1]:
        tokens.pop()
    if not tokens:
        raise ConfigError("missing headers")
    fields = [FieldSpec.from_token(token) for token in tokens]
    logger.info(
        "Configuring field extraction. Delimiter: '%s'. Positions and names: %s",
        pattern.pattern,
        header_spec,
    )
    return ExtractionPlan(pattern, fields)


def configure(config_source: ConfigSource) -> ExtractionPlan:
    """Build an :class:`ExtractionPlan` from the :code:`delimiter` and :code:`headers`
    values of a configuration source."""
    return parse_plan(config_source.get(DELIMITER_KEY), config_source.get(HEADERS_KEY))
