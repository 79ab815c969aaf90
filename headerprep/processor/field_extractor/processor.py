"""
FieldExtractor
==============

The `field_extractor` interceptor splits the body of an event on a configured delimiter
and copies the values at the configured positions into the headers of the event.
Positions that are not present in a record are logged and skipped, the event is
always passed on.

Interceptor Configuration
^^^^^^^^^^^^^^^^^^^^^^^^^
..  code-block:: yaml
    :linenos:

    - hdfs_path:
        type: field_extractor
        delimiter: ":"
        headers: "0:headerA, 2:headerB"

.. autoclass:: headerprep.processor.field_extractor.processor.FieldExtractor.Config
   :members:
   :undoc-members:
   :inherited-members:
   :noindex:

.. automodule:: headerprep.processor.field_extractor.plan
"""

import logging
from typing import List

from attr import define, field, validators

from headerprep.abc.config_source import MappingConfigSource
from headerprep.abc.interceptor import Interceptor
from headerprep.event import TextRecord
from headerprep.metrics.metrics import CounterMetric
from headerprep.processor.field_extractor.plan import ExtractionPlan, configure
from headerprep.util.defaults import DEFAULT_ENCODING, DELIMITER_KEY, HEADERS_KEY
from headerprep.util.validators import encoding_validator

logger = logging.getLogger("FieldExtractor")


def split_record(
    plan: ExtractionPlan, event: TextRecord, encoding: str = DEFAULT_ENCODING
) -> List[str]:
    """Decode the body of the event and split it on the delimiter of the plan.

    Only the text between two delimiter matches is returned, groups of the delimiter
    pattern are never part of the result. Trailing empty values are kept.
    """
    text = event.body.decode(encoding, errors="replace")
    values = []
    start = 0
    for match in plan.delimiter_pattern.finditer(text):
        if match.end() == 0:
            # an empty match at the beginning does not open an empty first value
            continue
        values.append(text[start : match.start()])
        start = match.end()
    values.append(text[start:])
    return values


def _write_headers(
    plan: ExtractionPlan, event: TextRecord, diagnostics: logging.Logger, encoding: str
) -> int:
    """Write the found fields to the headers and return the number of missing fields."""
    values = split_record(plan, event, encoding)
    missing = 0
    for field_spec in plan.fields:
        if 0 <= field_spec.position < len(values):
            event.headers[field_spec.name] = values[field_spec.position]
            continue
        # misconfiguration or dirty data, the event is passed on anyway
        missing += 1
        diagnostics.warning(
            "%s not set. No attribute found at position: %s with delimiter: '%s'",
            field_spec.name,
            field_spec.position,
            plan.delimiter,
        )
    return missing


def apply(
    plan: ExtractionPlan,
    event: TextRecord,
    diagnostics: logging.Logger = None,
    encoding: str = DEFAULT_ENCODING,
) -> TextRecord:
    """Write the configured fields of the event body into its headers.

    Parameters
    ----------
    plan: ExtractionPlan
        the plan to apply
    event: TextRecord
        the event, its headers are changed in place
    diagnostics: logging.Logger, optional
        receives a warning for every field that is not present in the record
    encoding: str, optional
        the encoding of the event body

    Returns
    -------
    TextRecord
        the same event
    """
    _write_headers(plan, event, diagnostics if diagnostics is not None else logger, encoding)
    return event


def apply_all(
    plan: ExtractionPlan,
    events: List[TextRecord],
    diagnostics: logging.Logger = None,
    encoding: str = DEFAULT_ENCODING,
) -> List[TextRecord]:
    """Apply the plan to every event and return them in a new list of the same order."""
    return [apply(plan, event, diagnostics, encoding) for event in events]


class FieldExtractor(Interceptor):
    """An interceptor that extracts positional fields of delimited records into headers"""

    @define(kw_only=True, slots=False)
    class Config(Interceptor.Config):
        """Config of the FieldExtractor"""

        delimiter: str = field(validator=validators.instance_of(str), default="")
        """The regular expression to split the event body on. Required."""
        headers: str = field(validator=validators.instance_of(str), default="")
        """Comma separated list of :code:`position:name` tokens, e.g.
        :code:`0:headerA, 2:headerB`. Required."""
        encoding: str = field(validator=encoding_validator, default=DEFAULT_ENCODING)
        """The encoding used to decode the event body. Defaults to :code:`utf-8`."""

    @define(kw_only=True)
    class Metrics(Interceptor.Metrics):
        """Tracks statistics about the FieldExtractor"""

        number_of_missing_fields: CounterMetric = field(
            factory=lambda: CounterMetric(
                description="Number of configured fields that were not found in a record",
                name="field_extractor_number_of_missing_fields",
            )
        )
        """Number of configured fields that were not found in a record"""

    __slots__ = ["_plan"]

    _plan: ExtractionPlan

    def __init__(
        self,
        name: str,
        configuration: "FieldExtractor.Config",
        diagnostics: logging.Logger = None,
    ):
        super().__init__(name, configuration, diagnostics)
        self._plan = configure(
            MappingConfigSource(
                {
                    DELIMITER_KEY: self._config.delimiter,
                    HEADERS_KEY: self._config.headers,
                }
            )
        )

    @property
    def plan(self) -> ExtractionPlan:
        """returns the extraction plan"""
        return self._plan

    def _intercept(self, event: TextRecord) -> TextRecord:
        missing = _write_headers(self._plan, event, self._logger, self._config.encoding)
        if missing:
            self.metrics.number_of_missing_fields += missing
        return event
