"""helper classes for headerprep logging"""

import logging
from socket import gethostname


class HeaderprepFormatter(logging.Formatter):
    """
    A custom formatter for headerprep logging with additional attributes.

    The available attributes are listed in the
    `python documentation <https://docs.python.org/3/library/logging.html#logrecord-attributes>`_ .
    Additionally, the formatter provides the following headerprep specific attributes:

    .. table::

        +-----------------------+--------------------------------------------------+
        | attribute             | description                                      |
        +=======================+==================================================+
        | %(hostname)           | (headerprep specific) The hostname of the        |
        |                       | machine where the log was emitted                |
        +-----------------------+--------------------------------------------------+

    """

    def format(self, record):
        record.hostname = gethostname()
        return super().format(record)
