"""
Dry Run
-------

Interceptor configurations can be tested by executing them in a dry run.
The dry run takes a path to a text file with one record per line, passes every record
through the configured interceptor chain and prints the resulting headers to the console:

..  code-block:: bash
    :caption: Directly with Python

    headerprep test dry-run $CONFIG $RECORDS

Where :code:`$CONFIG` is the path to a configuration file and :code:`$RECORDS` is the path
to the records. Headers that were set are printed in green, records without any header
are counted as untouched.
"""

import json
import logging
from functools import cached_property
from pathlib import Path
from typing import List

from colorama import Back, Fore

from headerprep.abc.interceptor import Interceptor
from headerprep.event import TextRecord
from headerprep.util.configuration import Configuration
from headerprep.util.helper import color_print_line, color_print_title


class DryRunner:
    """Used to run the interceptor chain with given records and show the extracted headers."""

    @cached_property
    def _interceptors(self) -> List[Interceptor]:
        return self._config.create_interceptors(self._logger)

    @cached_property
    def _input_records(self) -> List[TextRecord]:
        lines = Path(self._input_file_path).read_bytes().splitlines()
        return [TextRecord(body=line) for line in lines]

    def __init__(self, input_file_path: str, config: Configuration):
        self._input_file_path = input_file_path
        self._config = config
        self._logger = logging.getLogger("DryRunner")

    def run(self) -> List[TextRecord]:
        """Run the dry runner and return the intercepted records."""
        records = self._input_records
        for interceptor in self._interceptors:
            records = interceptor.intercept_all(records)
        transformed_cnt = 0
        for record in records:
            if record.headers:
                transformed_cnt += 1
            self._print_record(record)
        color_print_title(Back.WHITE, f"TRANSFORMED RECORDS: {transformed_cnt}/{len(records)}")
        for interceptor in self._interceptors:
            interceptor.shut_down()
        return records

    @staticmethod
    def _print_record(record: TextRecord):
        color_print_title(Back.CYAN, "PROCESSED RECORD")
        color_print_line(Back.BLACK, Fore.CYAN, repr(record.body))
        if record.headers:
            headers_json = json.dumps(record.headers, sort_keys=True, indent=4)
            color_print_line(Back.BLACK, Fore.GREEN, headers_json)
        else:
            color_print_line(Back.BLACK, Fore.YELLOW, "no headers set")
