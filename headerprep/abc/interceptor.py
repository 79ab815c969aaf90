"""Abstract module for interceptors"""

import logging
from abc import abstractmethod
from typing import List

from attr import define, field

from headerprep.abc.component import Component
from headerprep.event import TextRecord
from headerprep.metrics.metrics import CounterMetric, HistogramMetric, Metric

logger = logging.getLogger("Interceptor")


class Interceptor(Component):
    """Abstract Interceptor Class to define the Interface

    An interceptor receives events from the host pipeline, changes them in place and
    returns them so the host can forward them downstream.
    """

    @define(kw_only=True)
    class Metrics(Component.Metrics):
        """Tracks statistics about this interceptor"""

        number_of_processed_events: CounterMetric = field(
            factory=lambda: CounterMetric(
                description="Number of events that were intercepted",
                name="number_of_processed_events",
            )
        )
        """Number of events that were intercepted"""
        processing_time_per_event: HistogramMetric = field(
            factory=lambda: HistogramMetric(
                description="Time in seconds that it took to intercept an event",
                name="processing_time_per_event",
            )
        )
        """Time in seconds that it took to intercept an event"""

    __slots__ = ["_logger"]

    _logger: logging.Logger

    def __init__(
        self, name: str, configuration: "Interceptor.Config", diagnostics: logging.Logger = None
    ):
        super().__init__(name, configuration)
        self._logger = diagnostics if diagnostics is not None else logging.getLogger(
            self.__class__.__name__
        )

    @property
    def metric_labels(self) -> dict:
        """Return metric labels."""
        return {
            "component": "interceptor",
            "type": self._config.type,
            "name": self.name,
        }

    @Metric.measure_time()
    def intercept(self, event: TextRecord) -> TextRecord:
        """Intercept a single event.

        Parameters
        ----------
        event : TextRecord
           The event to change in place.

        Returns
        -------
        TextRecord
            The same event, ready to be forwarded downstream.
        """
        logger.debug("%s intercepting event %s", self.describe(), event)
        event = self._intercept(event)
        self.metrics.number_of_processed_events += 1
        return event

    def intercept_all(self, events: List[TextRecord]) -> List[TextRecord]:
        """Intercept a batch of events, preserving their order."""
        return [self.intercept(event) for event in events]

    @abstractmethod
    def _intercept(self, event: TextRecord) -> TextRecord: ...  # pragma: no cover
